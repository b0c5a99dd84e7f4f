from typing import List
from .errors import SelectionError
from .schema import NormalizedItem, SearchHit


class ResultNormalizer:
    @staticmethod
    def name_label(hit: SearchHit) -> str:
        """Label for a TV show or person (hits carrying a name)."""
        media_type = hit.media_type or ""
        if media_type == "person":
            return f"{hit.name} - {media_type}"
        return f"{hit.name} - {media_type} - released: {hit.first_air_date or ''}"

    @staticmethod
    def title_label(hit: SearchHit) -> str:
        """Label for a movie (hits carrying a title)."""
        return f"{hit.title} - {hit.media_type or ''} - released: {hit.release_date or ''}"

    @staticmethod
    def to_item(hit: SearchHit, label: str, title: str) -> NormalizedItem:
        return NormalizedItem(
            id=hit.id,
            label=label,
            title=title,
            overview=hit.overview or "",
            original_language=hit.original_language or "",
            media_type=hit.media_type or ""
        )

    @staticmethod
    def normalize_hits(hits: List[SearchHit]) -> List[NormalizedItem]:
        """Turn raw search hits into selectable items, keeping response order.

        The name and title checks are independent: a hit carrying both yields
        two items, the name one first. Hits with neither are dropped.
        """
        items = []
        for hit in hits:
            if hit.name is not None:
                items.append(ResultNormalizer.to_item(hit, ResultNormalizer.name_label(hit), hit.name))
            if hit.title is not None:
                items.append(ResultNormalizer.to_item(hit, ResultNormalizer.title_label(hit), hit.title))
        return items


def select_item(items: List[NormalizedItem], index: int) -> NormalizedItem:
    """Return the item at a zero-based selection index."""
    if not 0 <= index < len(items):
        raise SelectionError(f"Selection {index} is out of range for {len(items)} result(s)")
    return items[index]
