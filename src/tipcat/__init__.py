"""tipcat: render a numbered catalog of language-idiom tips."""

__version__ = "0.1.0"
