"""Half & half eligibility rules.

Which dishes of a category may be combined into one half & half item. The
rules are a plain value owned by the app; anything that needs to react to a
change subscribes instead of re-reading storage.
"""
import json
import logging
from threading import Lock
from typing import Callable, Iterable, List

from pydantic import BaseModel, TypeAdapter

from app.schemas.menu import Dish

logger = logging.getLogger(__name__)


class HalfHalfRule(BaseModel):
    category_id: str
    available: bool = True
    dish_ids: List[str] = []


Listener = Callable[[List[HalfHalfRule]], None]

_rules_adapter = TypeAdapter(List[HalfHalfRule])


def parse_rules(raw: str) -> List[HalfHalfRule]:
    return _rules_adapter.validate_python(json.loads(raw or "[]"))


class HalfHalfRegistry:
    def __init__(self, rules: Iterable[HalfHalfRule] = ()):
        self._rules = list(rules)
        self._listeners: List[Listener] = []
        self._lock = Lock()

    def get(self) -> List[HalfHalfRule]:
        return list(self._rules)

    def update(self, rules: Iterable[HalfHalfRule]) -> None:
        with self._lock:
            self._rules = list(rules)
            listeners = list(self._listeners)
        logger.info("half-half rules updated: %d categories", len(self._rules))
        for cb in listeners:
            cb(self.get())

    def subscribe(self, cb: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(cb)

        def unsubscribe() -> None:
            with self._lock:
                if cb in self._listeners:
                    self._listeners.remove(cb)
        return unsubscribe

    def _rule_for(self, category_id: str) -> HalfHalfRule | None:
        for r in self._rules:
            if r.category_id == category_id and r.available and r.dish_ids:
                return r
        return None

    def is_eligible(self, dish: Dish) -> bool:
        rule = self._rule_for(dish.category_id)
        return rule is not None and dish.id in rule.dish_ids

    def can_combine(self, left: Dish, right: Dish) -> bool:
        return (left.category_id == right.category_id
                and self.is_eligible(left) and self.is_eligible(right))

    def dishes_for(self, category_id: str, dishes: Iterable[Dish]) -> List[Dish]:
        rule = self._rule_for(category_id)
        if rule is None:
            return []
        return [d for d in dishes if d.category_id == category_id and d.id in rule.dish_ids]
