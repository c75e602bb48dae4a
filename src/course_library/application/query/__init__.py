"""Collection-query shaping – property mapping, sorting, ordering, links, keys."""
from course_library.application.query.errors import (
    InvalidFieldsError,
    InvalidSortExpressionError,
    MalformedKeyError,
    UnknownFieldError,
    UnknownMappingError,
)
from course_library.application.query.keys import CompositeKeyBinder, KeyFormat
from course_library.application.query.links import ResourceLinkBuilder, ResourceUriType
from course_library.application.query.mapping import (
    PropertyMapping,
    PropertyMappingService,
    PropertyMappingTable,
    PropertyTarget,
)
from course_library.application.query.ordering import apply_sort, build_comparator
from course_library.application.query.pipeline import CollectionQueryPipeline, PreparedQuery
from course_library.application.query.shaping import PropertyChecker, parse_fields, shape
from course_library.application.query.sorting import (
    ResolvedSortTerm,
    SortExpressionParser,
    SortTerm,
    parse_terms,
)

__all__ = [
    "CollectionQueryPipeline",
    "CompositeKeyBinder",
    "InvalidFieldsError",
    "InvalidSortExpressionError",
    "KeyFormat",
    "MalformedKeyError",
    "PreparedQuery",
    "PropertyChecker",
    "PropertyMapping",
    "PropertyMappingService",
    "PropertyMappingTable",
    "PropertyTarget",
    "ResolvedSortTerm",
    "ResourceLinkBuilder",
    "ResourceUriType",
    "SortExpressionParser",
    "SortTerm",
    "UnknownFieldError",
    "UnknownMappingError",
    "apply_sort",
    "build_comparator",
    "parse_fields",
    "parse_terms",
    "shape",
]
