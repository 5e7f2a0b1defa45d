"""
Operator Model
==============

Domain model representing a person who performs services in a shop.
"""
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field


@dataclass
class Operator:
    """
    Operator domain model.

    ``service_ids`` lists the services the operator can perform (order is
    irrelevant). ``working_hours`` is an opaque JSON object.
    """
    shop_id: str
    name: str
    service_ids: List[str] = field(default_factory=list)
    working_hours: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None
