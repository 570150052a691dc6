"""Source Notes.

Turns a Java source file into a Markdown reading note: headings per
type and member, quoted Javadoc text, and reconstructed declarations.
"""

__version__ = "0.1.0"
