"""
Base commune des repositories SQLModel de listing.

Factorise le contrat de tri / recherche partage par les formations,
playlists et categories. Chaque sous-classe declare :

- model : la classe SQLModel principale
- sortable / searchable : listes blanches FieldRef -> colonne SQL
- exact_search : FieldRef de searchable compares par egalite d'identifiant
- joins : chemin de jointure (tuple de relations) pour chaque relation
- default_order : ordre du listing par defaut et des resultats de recherche
- count_field : nom du tri par nombre de formations ("" si non supporte)

Un FieldRef absent de la liste blanche leve InvalidQueryError avant toute
construction de requete.
"""

from typing import Any, ClassVar, Generic, Optional, TypeVar

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from mediatek.core.exceptions import InvalidQueryError
from mediatek.core.value_objects import FieldRef, SortDirection
from mediatek.infrastructure.persistence.models import Formation

ModelT = TypeVar("ModelT", bound=SQLModel)

COUNT_FIELD = "nb_formations"


class SQLModelCatalogRepository(Generic[ModelT]):
    """
    Repository SQLModel generique pour les entites listables.

    Recoit une session SQLModel via injection de dependances ; la session
    appartient a l'appelant (une session par requete HTTP).
    """

    model: ClassVar[type[SQLModel]]
    sortable: ClassVar[dict[FieldRef, Any]] = {}
    searchable: ClassVar[dict[FieldRef, Any]] = {}
    exact_search: ClassVar[frozenset[FieldRef]] = frozenset()
    joins: ClassVar[dict[str, tuple[Any, ...]]] = {}
    default_order: ClassVar[tuple[Any, ...]] = ()
    count_field: ClassVar[str] = ""

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    # ------------------------------------------------------------------
    # Resolution des champs
    # ------------------------------------------------------------------

    def _resolve(self, allowed: dict[FieldRef, Any], field: str, relation: str) -> Any:
        """Retourne la colonne autorisee pour (field, relation) ou leve InvalidQueryError."""
        ref = FieldRef(field, relation or "")
        try:
            return allowed[ref]
        except KeyError:
            raise InvalidQueryError(
                f"Champ non autorise pour {self.model.__name__} : {ref}",
                field=field,
                relation=relation,
            ) from None

    def _join(self, statement: Any, relation: str, outer: bool = False) -> Any:
        """Ajoute les jointures du chemin declare pour la relation."""
        for attribute in self.joins[relation]:
            statement = statement.outerjoin(attribute) if outer else statement.join(attribute)
        return statement

    @staticmethod
    def _parse_id(value: str, field: str, relation: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise InvalidQueryError(
                f"Identifiant non numerique : {value!r}", field=field, relation=relation
            ) from None

    @staticmethod
    def _ordered(column: Any, direction: SortDirection) -> Any:
        return column.asc() if direction is SortDirection.ASC else column.desc()

    @staticmethod
    def _unique(rows: Any) -> list[ModelT]:
        """Deduplique les lignes issues d'une jointure multiple en gardant l'ordre."""
        seen: set[int] = set()
        result: list[ModelT] = []
        for row in rows:
            if row.id not in seen:
                seen.add(row.id)
                result.append(row)
        return result

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    def find(self, entity_id: int) -> Optional[ModelT]:
        """Recupere une entite par son ID."""
        return self._session.get(self.model, entity_id)

    def find_all(self) -> list[ModelT]:
        """Liste toutes les entites dans l'ordre par defaut."""
        statement = select(self.model).order_by(*self.default_order)
        return list(self._session.exec(statement).all())

    def count(self) -> int:
        """Nombre total d'entites."""
        return self._session.exec(select(func.count()).select_from(self.model)).one()

    def find_all_order_by(self, field: str, direction: str, relation: str = "") -> list[ModelT]:
        """
        Liste toutes les entites triees sur le champ demande.

        Sans relation, le tri porte sur un champ de l'entite principale ;
        sinon la relation est jointe et le tri porte sur son champ.
        Le tri par nombre de formations regroupe par entite et ordonne
        par le nombre de lignes jointes.
        """
        sort_direction = SortDirection.parse(direction)
        if self.count_field and not relation and field == self.count_field:
            return self._find_all_order_by_count(sort_direction)

        column = self._resolve(self.sortable, field, relation)
        statement = select(self.model)
        if relation:
            statement = self._join(statement, relation)
        statement = statement.order_by(self._ordered(column, sort_direction))
        return self._unique(self._session.exec(statement).all())

    def find_by_contain_value(self, field: str, value: str, relation: str = "") -> list[ModelT]:
        """
        Liste les entites dont le champ contient la valeur (LIKE %valeur%).

        Les champs de exact_search (identifiants) sont compares par egalite ;
        la valeur doit alors etre un entier. Une valeur vide renvoie le listing
        par defaut plutot qu'un resultat vide.
        """
        column = self._resolve(self.searchable, field, relation)
        if not value:
            return self.find_all()

        statement = select(self.model)
        if relation:
            statement = self._join(statement, relation)
        if FieldRef(field, relation or "") in self.exact_search:
            condition = column == self._parse_id(value, field, relation)
        else:
            condition = column.contains(value)
        statement = statement.where(condition).order_by(*self.default_order)
        return self._unique(self._session.exec(statement).all())

    def _find_all_order_by_count(self, direction: SortDirection) -> list[ModelT]:
        """Tri par nombre de formations, a egalite par ordre par defaut."""
        statement = (
            select(self.model)
            .outerjoin(self.model.formations)
            .group_by(self.model.id)
            .order_by(self._ordered(func.count(Formation.id), direction), *self.default_order)
        )
        return list(self._session.exec(statement).all())

    # ------------------------------------------------------------------
    # Ecriture
    # ------------------------------------------------------------------

    def add(self, entity: ModelT) -> ModelT:
        """Persiste l'entite (insertion ou mise a jour) puis commit."""
        self._session.add(entity)
        try:
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            logger.warning("Contrainte violee a l'enregistrement", model=self.model.__name__)
            raise
        self._session.refresh(entity)
        return entity

    def remove(self, entity: ModelT) -> None:
        """Supprime l'entite puis commit."""
        self._session.delete(entity)
        try:
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            logger.warning(
                "Contrainte violee a la suppression",
                model=self.model.__name__,
                entity_id=entity.id,
            )
            raise
