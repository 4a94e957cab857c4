"""Bundled example scripts."""

DEFAULT_SCRIPT = """\
# block adds a block.
# color-blue makes block blue.
# space-4 gives 4 spaces.
# repeat-6 repeats the block 6 times
# end takes you to next line

block.color-blue space-4 block.color-blue space-2 block.color-red.repeat-3 end
block.color-blue space-4 block.color-blue space-6 block.color-red end
block.color-blue.repeat-3 space-6 block.color-red end
block.color-blue space-4 block.color-blue space-6 block.color-red end
block.color-blue space-4 block.color-blue space-2 block.color-red.repeat-3 end
"""
