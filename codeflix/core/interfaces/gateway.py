"""
Interfaces base para gateways (Data Access Layer)

Estos protocols definen el contrato que deben implementar todos los gateways
de agregados, siguiendo el patrón Repository y Dependency Inversion Principle.
"""

from abc import abstractmethod
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

from codeflix.core.pagination import Pagination, SearchQuery

T = TypeVar("T")  # Aggregate type
ID = TypeVar("ID")  # Identifier type


@runtime_checkable
class IGateway(Protocol, Generic[T, ID]):
    """
    Interface base para todos los gateways de agregados.

    Abstrae el acceso a datos. Las implementaciones concretas pueden ser
    en memoria o usar SQLAlchemy.

    Type Parameters:
        T: Tipo de agregado que maneja el gateway
        ID: Tipo de identificador del agregado

    Example:
        ```python
        class InMemoryCategoryGateway(IGateway[Category, CategoryID]):
            def find_by_id(self, id: CategoryID) -> Optional[Category]:
                return self._items.get(id)
        ```
    """

    @abstractmethod
    def create(self, aggregate: T) -> T:
        """
        Persiste un agregado nuevo.

        Args:
            aggregate: Agregado a guardar

        Returns:
            Agregado guardado
        """
        ...

    @abstractmethod
    def update(self, aggregate: T) -> T:
        """
        Persiste los cambios de un agregado existente.

        Args:
            aggregate: Agregado modificado

        Returns:
            Agregado guardado
        """
        ...

    @abstractmethod
    def delete_by_id(self, id: ID) -> None:
        """
        Elimina un agregado por su ID. No falla si no existe.

        Args:
            id: Identificador del agregado a eliminar
        """
        ...

    @abstractmethod
    def find_by_id(self, id: ID) -> Optional[T]:
        """
        Encuentra un agregado por su ID.

        Args:
            id: Identificador único del agregado

        Returns:
            Agregado encontrado o None si no existe
        """
        ...

    @abstractmethod
    def find_all(self, query: SearchQuery) -> Pagination[T]:
        """
        Obtiene una página de agregados.

        Respeta page, per_page, terms, sort y direction del SearchQuery.

        Args:
            query: Consulta normalizada

        Returns:
            Página de agregados
        """
        ...
