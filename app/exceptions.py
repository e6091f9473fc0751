class OrderBotError(Exception):
    """Base class for errors raised by the order bot core."""


class UnknownUserError(OrderBotError):
    """An order was written by someone missing from the user directory."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Unknown user {user_id}")


class MenuNotFoundError(OrderBotError):
    """The boundary markers of a vendor menu are missing from the page."""

    def __init__(self, vendor: str, day: int):
        self.vendor = vendor
        self.day = day
        super().__init__(f"Menu for {vendor} not found for day {day}")


class FetchError(OrderBotError):
    """Fetching a menu page failed."""


class OrderContractError(OrderBotError):
    """A restaurant was identified but its own pattern does not match the text."""
