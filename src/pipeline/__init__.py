"""pipeline
========

Chain middleware-style wrappers around a terminal handler.

>>> from pipeline import create
>>> create().append(lambda x: "[A" + x + "A]", lambda x: "[B" + x + "B]").finalize("core")
'[A[BcoreB]A]'
"""

from .composer import Composer, Handler, Pipeline, create
from .functional import compose, identity

__all__ = ["Composer", "Handler", "Pipeline", "create", "compose", "identity"]
