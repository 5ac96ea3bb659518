from codeflix.core.domain.identifiers import Identifier


class GenreID(Identifier):
    """Identifier of a Genre aggregate."""
