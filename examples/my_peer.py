"""
my_peer.py — A custom peer channel
==================================

GameSession talks to the other party only through ask() and show().
This peer plays from a fixed list of answers and keeps a log of every
message, which is handy for replaying a game or feeding answers from
another program.
"""

from fair_dice import PeerInteraction


class ScriptedPeer(PeerInteraction):

    def __init__(self, answers):
        self.answers = list(answers)
        self.log = []

    def ask(self, prompt):
        answer = self.answers.pop(0)
        self.log.append(f"{prompt}{answer}")
        print(f"{prompt}{answer}")
        return answer.strip()

    def show(self, message):
        self.log.append(message)
        print(message)
