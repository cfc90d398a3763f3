"""
Built-in Sokoban puzzle collection.

Small puzzles ranging from trivial to moderate.
All puzzles are ≤7x7 with ≤3 crates, small enough for move-by-move search.

Standard format:
  # = wall, ' ' = floor, . = goal, $ = crate, @ = pusher,
  * = crate on goal, + = pusher on goal
"""

PUZZLES: dict[str, str] = {}

# ------------------------------------------------------------------
# 0/1-crate puzzles  (trivial)
# ------------------------------------------------------------------

PUZZLES["Already Solved"] = """\
####
#* #
#@ #
####"""

PUZZLES["Corridor"] = """\
#####
#.$@#
#####"""

PUZZLES["One Crate"] = """\
####
#. #
#$ #
#@ #
####"""

PUZZLES["One Crate Wide"] = """\
######
#.   #
# $  #
#  @ #
######"""

# ------------------------------------------------------------------
# 2-crate puzzles
# ------------------------------------------------------------------

PUZZLES["Two Crate Line"] = """\
######
#    #
# @  #
# $$ #
# .. #
######"""

PUZZLES["Two Crate Across"] = """\
######
# .  #
#  $ #
# $  #
#  . #
# @  #
######"""

# ------------------------------------------------------------------
# 3-crate puzzles
# ------------------------------------------------------------------

PUZZLES["Three Down"] = """\
#######
#     #
# $$$ #
#     #
# ... #
#  @  #
#######"""

PUZZLES["Three Crate L"] = """\
######
#    #
# @$ #
# $  #
# $ .#
#  ..#
######"""


def get_puzzle_names() -> list[str]:
    """Return all puzzle names in order."""
    return list(PUZZLES.keys())


def get_puzzle(name: str) -> str:
    """Return the level text for a named puzzle."""
    return PUZZLES[name]
