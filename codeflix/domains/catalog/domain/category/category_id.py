from codeflix.core.domain.identifiers import Identifier


class CategoryID(Identifier):
    """Identifier of a Category aggregate."""
