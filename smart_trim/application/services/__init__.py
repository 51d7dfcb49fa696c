from .extension_composer import ExtensionComposer, splice_extension
from .sanitizer import sanitize
from .source_selector import SourceSelection, select_source
from .trimmer import TrimResult, Trimmer
from .truncator import TruncationResult, Truncator

__all__ = [
    "ExtensionComposer",
    "SourceSelection",
    "TrimResult",
    "Trimmer",
    "TruncationResult",
    "Truncator",
    "sanitize",
    "select_source",
    "splice_extension",
]
