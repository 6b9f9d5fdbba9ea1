class AnalyzerError(Exception):
    """Base exception for AI analysis errors."""
    pass


class GenerationError(AnalyzerError):
    """Custom exception for generation errors."""
    pass


class EmptyInputError(AnalyzerError):
    """Raised when there are no articles to analyze."""
    pass
