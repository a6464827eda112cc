class DomainListsError(Exception):
    """Raised when the domain-list data file cannot be loaded."""
