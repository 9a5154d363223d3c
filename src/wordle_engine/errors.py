"""Exception types raised by the solver engine.

Every error derives from WordleError so callers (the CLI loop, the simulator)
can catch one thing around user input.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for everything the engine raises on purpose."""


# malformed word or feedback code, raised at parse boundaries
class InvalidFormat(WordleError, ValueError):
    pass


# word is well formed but not in the accepted guess vocabulary
class InvalidGuess(WordleError):
    def __init__(self, word: str):
        super().__init__(f"'{word}' is not a valid guess word")
        self.word = word


class NoPossibleWords(WordleError):
    """The recorded history is jointly unsatisfiable.

    Usually a mistyped feedback pattern, or a word list that doesn't match the
    game's dictionary. The engine never recovers on its own; call reset().
    """

    def __init__(self, message: str = "No possible words remaining"):
        super().__init__(message)


# setup problem (e.g. empty dictionary), not a consistency problem
class AlgorithmFailure(WordleError):
    pass


class GameError(WordleError):
    pass


class NoTargetWord(GameError):
    def __init__(self):
        super().__init__("No target word set")


class GameFinished(GameError):
    def __init__(self):
        super().__init__("Game already finished")
