# common/query.py
import re
from typing import Dict, Iterable, Optional


def active_filter() -> dict:
    """Soft-delete predicate: a record is active while deleted_at is absent or null."""
    return {"$or": [{"deleted_at": {"$exists": False}}, {"deleted_at": None}]}


def contains(text: str) -> dict:
    return {"$regex": re.escape(text), "$options": "i"}


def keyword_filter(keyword: Optional[str], fields: Iterable[str]) -> Optional[dict]:
    keyword = (keyword or "").strip()
    fields = list(fields)
    if not keyword or not fields:
        return None
    return {"$or": [{field: contains(keyword)} for field in fields]}


def build_query(
    keyword: Optional[str] = None,
    fields: Iterable[str] = (),
    filters: Optional[Dict] = None,
    regex_filters: Optional[Dict] = None,
) -> dict:
    """AND together the active predicate, the keyword clause and field filters.

    Filters whose value is None or an empty string are ignored.
    """
    clauses = [active_filter()]

    keyword_clause = keyword_filter(keyword, fields)
    if keyword_clause:
        clauses.append(keyword_clause)

    for field, value in (filters or {}).items():
        if value is None or value == "":
            continue
        clauses.append({field: value})

    for field, value in (regex_filters or {}).items():
        if value is None or str(value).strip() == "":
            continue
        clauses.append({field: contains(str(value).strip())})

    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}
