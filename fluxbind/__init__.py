from .binder import Accessor, bind, bind_fields, map_fields
from .classes import (
    append_classes,
    make_class_object,
    normalize_class_list,
    remove_classes,
)
from .events import Event, emit, emit_global
from .fields import FieldSpec, FieldSpecKind
from .observer import ObservedList, observe
from .store import MutationRecord, Store, StoreLike
from .text import (
    decode_data_json,
    encode_data_json,
    escape_regex_string,
    normalize_data_attribute_name,
    uppercase_first,
)
from .vocabulary import Vocabulary, make_getters, make_mutations, make_vocabulary

__all__ = [
    "Accessor",
    "Event",
    "FieldSpec",
    "FieldSpecKind",
    "MutationRecord",
    "ObservedList",
    "Store",
    "StoreLike",
    "Vocabulary",
    "append_classes",
    "bind",
    "bind_fields",
    "decode_data_json",
    "emit",
    "emit_global",
    "encode_data_json",
    "escape_regex_string",
    "make_class_object",
    "make_getters",
    "make_mutations",
    "make_vocabulary",
    "map_fields",
    "normalize_class_list",
    "normalize_data_attribute_name",
    "observe",
    "remove_classes",
    "uppercase_first",
]
