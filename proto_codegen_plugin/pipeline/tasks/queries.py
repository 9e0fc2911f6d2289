"""
Query DSL injection for entity state types.

Every entity state gets a `Column` listing of its queryable fields, a
`query()` factory method and a `QueryBuilder` with one criterion per column.
Repeated and map fields are not queryable.
"""

from __future__ import annotations

from ..config import GenerationTaskConfig
from ..descriptors.nodes import SchemaType, Trait
from ..insertion_point import InsertionPoint
from ..naming import OutputNaming
from .base import CodeFragment, TemplateTask
from .java_types import accessor_name, getter_name, java_type

DEFAULT_COLUMN_TYPE = "io.spine.query.EntityColumn"
DEFAULT_QUERY_BUILDER = "io.spine.query.EntityQueryBuilder"
DEFAULT_CRITERION = "io.spine.query.EntityCriterion"


class GenerateQueries(TemplateTask):
    """Renders the query DSL of entity states.

    Parameters:
        column_type: Generic class of generated columns
        query_builder: Superclass of the generated query builder
        criterion: Generic class of the builder criteria
    """

    TEMPLATE = "queries.java.jinja2"

    def __init__(self, config: GenerationTaskConfig, naming: OutputNaming):
        super().__init__(config, naming)
        self.selector = config.selector.with_trait(Trait.ENTITY_STATE)

    def generate(self, schema_type: SchemaType) -> list[CodeFragment]:
        columns = [
            {
                "name": field.name,
                "accessor": accessor_name(field),
                "getter": getter_name(field),
                "java_type": java_type(field, self.naming),
            }
            for field in schema_type.fields
            if not field.is_collection
        ]
        content = self.render(
            class_name=self.naming.simple_class_name(schema_type),
            column_type=self.parameters.get("column_type", DEFAULT_COLUMN_TYPE),
            query_builder=self.parameters.get("query_builder", DEFAULT_QUERY_BUILDER),
            criterion=self.parameters.get("criterion", DEFAULT_CRITERION),
            columns=columns,
        )
        return [self.fragment(schema_type, InsertionPoint.CLASS_SCOPE, content)]
