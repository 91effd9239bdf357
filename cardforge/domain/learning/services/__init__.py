from .suggestion_curation import CurationStatus, EditBuffer, SuggestionCuration

__all__ = ["CurationStatus", "EditBuffer", "SuggestionCuration"]
