"""
IHTMLCorrector Interface - Abstract interface for balancing markup

Raw slices of markup can leave tags open; a corrector closes them.
"""

from abc import ABC, abstractmethod


class IHTMLCorrector(ABC):
    """Abstract interface for HTML correction."""

    @abstractmethod
    def correct(self, html_content: str) -> str:
        """
        Close tags left dangling in an HTML fragment.

        Args:
            html_content: Possibly unbalanced HTML fragment

        Returns:
            Balanced HTML fragment
        """
        pass
