import pytest
from app.core import config

BOT_ID = "BOT123"

CONFIGURED = {
    "BOT_ID": BOT_ID,
    "PRESTO_URL": "https://presto.test/menu",
    "VEGLIFE_URL": "https://veglife.test/menu",
    "HAMKA_URL": "https://hamka.test/menu",
    "CLICK_URL": "https://click.test/menu",
    "MENU_CUTOFF_HOUR": 13,
    "CLICK_MAIN_MIN_PRICE": 120,
}

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Point the settings at a known bot id and fake menu links"""
    original = {name: getattr(config.settings, name) for name in CONFIGURED}
    for name, value in CONFIGURED.items():
        setattr(config.settings, name, value)

    yield

    for name, value in original.items():
        setattr(config.settings, name, value)

PRESTO_PAGE = """<html><body>
<h1>Týždenné menu</h1>
<div class="menu">
<h2>PONDELOK</h2>
<p>Polievka: Slepačí vývar&nbsp;&nbsp;s rezancami</p>
<p>1.   Bravčový rezeň, zemiaky</p>

<h2>UTOROK</h2>
<p>Polievka: Fazuľová</p>
<p>1. Kuracie &amp; ryža</p>
<h2>STREDA</h2>
<p>Polievka: Hrachová</p>
<h2>ŠTVRTOK</h2>
<p>Polievka: Cesnaková</p>
<h2>PIATOK</h2>
<p>Polievka: Gulášová</p>
<p>1. Vyprážaný syr</p>
<h3>CENA menu: 5,20 €</h3>
</div>
</body></html>"""

VEGLIFE_PAGE = """<html><body>
<div class="tyzden">
<h3>PONDELOK</h3>
<ul>
<li>Polievka: Šošovicová</li>
<li>1. Tofu   kari s ryžou</li>
</ul>
<p>Objednávky prijímame do 10:00</p>
<h3>UTOROK</h3>
<ul>
<li>Polievka: Brokolicová</li>
</ul>
<h3>STREDA</h3>
<ul>
<li>Polievka: Tekvicová</li>
</ul>
<p>Zmena menu vyhradená.</p>
<h3>ŠTVRTOK</h3>
<ul>
<li>Polievka: Paradajková</li>
</ul>
<h3>PIATOK</h3>
<ul>
<li>Polievka: Hrášková</li>
<li>2. Seitan gyros</li>
</ul>
<h3>SOBOTA</h3>
<p>Zatvorené</p>
</div>
</body></html>"""

HAMKA_PAGE = """<html><body>
<div class="header"><p>Hamka bistro</p></div>
<div class="entry-content">
<p>Polievka: <strong>Kapustnica</strong></p>
<p>1.   Kurací steak</p>
<p></p>
<p>2. Halušky&nbsp;s&nbsp;bryndzou</p>
</div>
<div class="footer"><p>Rozvoz do 14:00</p></div>
</body></html>"""

CLICK_PAGE = """<html><body>
<div id="denne-menu">
<h2>Menu Pondelok</h2>
<div class="item"><h4 class="modal-title">90 Guláš</h4></div>
<div class="item"><h4 class="modal-title"><span>150</span> Rizoto</h4></div>
<div class="item"><h4 class="modal-title">45 Dezert</h4></div>
<h3 id="polievky">Polievky</h3>
<div class="item"><h4 class="modal-title">Paradajková polievka</h4></div>
<div class="item"><h4 class="modal-title">Fazuľová   polievka</h4></div>
</div>
<div id="stale-menu">
<h4 class="modal-title">200 Burger</h4>
</div>
</body></html>"""

@pytest.fixture
def menu_pages():
    """Sample menu pages keyed by vendor"""
    return {
        "presto": PRESTO_PAGE,
        "veglife": VEGLIFE_PAGE,
        "hamka": HAMKA_PAGE,
        "click": CLICK_PAGE,
    }
