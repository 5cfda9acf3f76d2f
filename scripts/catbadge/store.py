from typing import Dict, Iterable, List, Optional

from catbadge.models import Category


def _key(category_id) -> Optional[str]:
    if category_id is None:
        return None
    key = str(category_id).strip()
    return key or None


class CategoryStore:
    """In-memory category lookup used for parent walks and slugs."""

    def __init__(self, categories: Iterable[Category]):
        self.category_by_id: Dict[str, Category] = {}
        self.children_by_parent: Dict[Optional[str], List[Category]] = {}

        for c in categories:
            self.category_by_id[_key(c.id)] = c

        for c in self.category_by_id.values():
            self.children_by_parent.setdefault(_key(c.parent_category_id), []).append(c)

        for kids in self.children_by_parent.values():
            kids.sort(key=lambda c: ((c.name or "").lower(), str(c.id)))

    def __len__(self):
        return len(self.category_by_id)

    def find_by_id(self, category_id) -> Optional[Category]:
        key = _key(category_id)
        if key is None:
            return None
        return self.category_by_id.get(key)

    def parent_of(self, category: Category) -> Optional[Category]:
        return self.find_by_id(category.parent_category_id)

    def ancestors(self, category: Category) -> List[Category]:
        """Chain from the root down to ``category``; stops on cycles."""
        chain = []
        current = category
        seen = set()

        while current:
            cid = _key(current.id)
            if cid in seen:
                break
            seen.add(cid)

            chain.append(current)
            current = self.parent_of(current)

        return list(reversed(chain))

    def slug_for(self, category: Optional[Category], separator: str = "/", depth: int = 3) -> str:
        if category is None:
            return ""

        chain = self.ancestors(category)[-depth:]
        parts = []
        for c in chain:
            slug = (c.slug or "").strip()
            parts.append(slug if slug else f"{c.id}-category")
        return separator.join(parts)
