"""Line classifiers for the md2html line classifier.

Each classifier is a mixin that recognizes one block construct and returns
a ClassifiedLine, or None when the line does not match.
"""

from md2html.lexer.classifiers.fence import FenceClassifierMixin
from md2html.lexer.classifiers.heading import HeadingClassifierMixin
from md2html.lexer.classifiers.list import ListClassifierMixin
from md2html.lexer.classifiers.quote import QuoteClassifierMixin
from md2html.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
