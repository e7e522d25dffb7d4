"""
main.py — Play one game and audit it
====================================

Runs a game with a scripted peer, then re-checks every commit-reveal
round the way a suspicious opponent would.

    python main.py
"""

import logging

from fair_dice import GameSession, parse_dice_args, verify
from my_peer import ScriptedPeer

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

# ── Dice: A beats B, B beats C, C beats A ──
dice = parse_dice_args(["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"])

# guess, die index, user roll number, system roll number
peer = ScriptedPeer(["1", "0", "3", "4"])

if __name__ == "__main__":
    result = GameSession(dice, peer).play()

    print()
    print("Audit:")
    for record in result.rounds:
        ok = verify(record.digest, record.key_hex, record.number)
        print(f"  {record.label:14} digest={record.digest[:16]}... verified={ok}")
