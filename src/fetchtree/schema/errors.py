from __future__ import annotations


class UnknownEntity(Exception):
    def __init__(self, entity: str):
        super().__init__(f"Unknown entity: {entity}")
        self.entity = entity


class UnknownRelation(Exception):
    def __init__(self, relation: str, entity: str):
        super().__init__(f"Unknown relation '{relation}' for entity '{entity}'")
        self.relation = relation
        self.entity = entity
