"""
Errors raised when a component breaks the framework contract.

Ordinary rule rejections are never errors: boards signal them by returning
False from update_board. These exceptions cover the unrecoverable cases that
end a single game session.
"""


class GameContractError(RuntimeError):
    """A board, UI or player broke the framework contract."""


class UnsupportedPlayerKind(GameContractError):
    """A UI was asked to build a player kind it cannot construct."""
