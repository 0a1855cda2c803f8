from .content import *  # noqa: F401,F403
from .content import __all__ as _content_all
from .writer import Writer

__all__ = [*_content_all, "Writer"]
