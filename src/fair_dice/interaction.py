# Area: Interaction
"""
fair_dice.interaction — The peer's side of the game
===================================================

GameSession never reads stdin or writes stdout itself. It talks to the
peer through a PeerInteraction: ask() blocks until the peer answers one
question, show() publishes a message (digests, revealed keys, results).

Subclass PeerInteraction to plug the game into another channel:

    class SocketPeer(PeerInteraction):
        def ask(self, prompt): ...
        def show(self, message): ...
"""

from abc import ABC, abstractmethod


class PeerInteraction(ABC):
    """
    Abstract line-oriented channel to the peer.

    ask() is called at most once per logical question and may be called
    again with the same prompt after an invalid answer.
    """

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """
        Ask the peer a question and block until it answers.

        Parameters
        ----------
        prompt : str
            The question text, e.g. "Add your number modulo 6 (0..5): "

        Returns
        -------
        str
            The peer's answer with surrounding whitespace removed.
        """
        ...

    @abstractmethod
    def show(self, message: str) -> None:
        """Publish a message to the peer."""
        ...


class ConsoleInteraction(PeerInteraction):
    """PeerInteraction over the terminal."""

    def ask(self, prompt: str) -> str:
        return input(prompt).strip()

    def show(self, message: str) -> None:
        print(message)
