"""Declaration loader for dtsstub

Reads the serialized output of the type-checking front end (one YAML or
JSON document per declaration source) into the TypeNode model.

Document layout:
    env:
      "module:M":
        object:
          type: object
          meta: {kind: module}
          properties:
            f:
              type: {type: object, meta: {kind: interface}, calls: [{parameters: [{name: x}]}]}
      C:
        object: {type: object, meta: {kind: class}, properties: {g: {type: {type: number}}}}

Nodes and properties without meta.origin are stamped with the identifier
of the source they were read from. YAML anchors and aliases may be used to
share nodes or build self-referential type graphs; node identity is kept.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

import yaml

from dtsstub.core.stub_logger import StubLogger
from dtsstub.core.type_nodes import (
    BuiltinKind,
    BuiltinNode,
    CallSignature,
    EnumNode,
    EnvEntry,
    ObjectKind,
    ObjectNode,
    Parameter,
    Property,
    ReferenceNode,
    TypeNode,
    TypeParamNode,
    UnknownNode,
)

BUILTIN_NAMES = {kind.value: kind for kind in BuiltinKind}
OBJECT_KINDS = {
    ObjectKind.MODULE.value: ObjectKind.MODULE,
    ObjectKind.INTERFACE.value: ObjectKind.INTERFACE,
    ObjectKind.CLASS.value: ObjectKind.CLASS,
}


class DeclarationFormatError(ValueError):
    """Serialized declaration document does not match the expected layout"""


@dataclass
class DeclarationSource:
    """One declaration source handed to the front end

    Attributes:
        file: Identifier of the source, used as origin of its declarations
        text: Serialized declaration document
    """
    file: str
    text: str


class DeclarationLoader:
    """Builds the flat symbol environment of one declaration source"""

    def __init__(self, source: DeclarationSource) -> None:
        self.source = source
        self._nodes: Dict[int, TypeNode] = {}
        self._properties: Dict[int, Property] = {}

    def load(self) -> Dict[str, EnvEntry]:
        """Parse the source and convert its environment

        Returns:
            Mapping from fully-qualified symbol name to EnvEntry

        Raises:
            DeclarationFormatError: If the document is malformed
        """
        try:
            document = yaml.safe_load(self.source.text)
        except yaml.YAMLError as e:
            raise DeclarationFormatError(f"Cannot parse declarations in {self.source.file}: {e}")

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise DeclarationFormatError(f"Declarations in {self.source.file} must be a mapping")

        env = document.get('env')
        if env is None:
            return {}
        if not isinstance(env, dict):
            raise DeclarationFormatError(f"'env' in {self.source.file} must be a mapping")

        result: Dict[str, EnvEntry] = {}
        for name, entry in env.items():
            if not isinstance(entry, dict) or 'object' not in entry:
                raise DeclarationFormatError(
                    f"Entry '{name}' in {self.source.file} has no 'object'"
                )
            result[str(name)] = EnvEntry(object=self._convert_node(entry['object'], str(name)))
        return result

    def _field(self, raw: Mapping[str, Any], key: str, expected: type, where: str) -> Any:
        """Get an optional field, checking its container type"""
        value = raw.get(key)
        if value is None:
            return expected()
        if not isinstance(value, expected):
            raise DeclarationFormatError(
                f"'{key}' of '{where}' in {self.source.file} must be a {'mapping' if expected is dict else 'list'}, "
                f"got {type(value).__name__}"
            )
        return value

    def _origin_of(self, raw: Mapping[str, Any], where: str) -> str:
        meta = self._field(raw, 'meta', dict, where)
        return meta.get('origin', self.source.file)

    def _convert_node(self, raw: Any, where: str) -> TypeNode:
        """Convert a raw node mapping, reusing nodes already converted"""
        if not isinstance(raw, dict):
            raise DeclarationFormatError(
                f"Type node at '{where}' in {self.source.file} must be a mapping, got {type(raw).__name__}"
            )

        cached = self._nodes.get(id(raw))
        if cached is not None:
            return cached

        type_name = str(raw.get('type', ''))
        origin = self._origin_of(raw, where)

        if type_name == 'object':
            meta = self._field(raw, 'meta', dict, where)
            raw_kind = str(meta.get('kind', ''))
            node = ObjectNode(
                origin=origin,
                kind=OBJECT_KINDS.get(raw_kind, ObjectKind.UNKNOWN),
                raw_kind=raw_kind,
            )
            # Register before descending so cycles resolve to this node
            self._nodes[id(raw)] = node
            for prop_name, raw_prop in self._field(raw, 'properties', dict, where).items():
                prop = self._convert_property(str(prop_name), raw_prop, f"{where}.{prop_name}")
                node.properties[prop.name] = prop
            node.calls = [self._convert_call(call, where) for call in self._field(raw, 'calls', list, where)]
            return node

        if type_name in BUILTIN_NAMES:
            node = BuiltinNode(origin=origin, kind=BUILTIN_NAMES[type_name])
        elif type_name == 'reference':
            node = ReferenceNode(origin=origin, name=raw.get('name'))
        elif type_name == 'enum':
            node = EnumNode(origin=origin)
        elif type_name == 'type-param':
            node = TypeParamNode(origin=origin, name=raw.get('name'))
        else:
            node = UnknownNode(origin=origin, type_name=type_name)

        self._nodes[id(raw)] = node
        return node

    def _convert_property(self, name: str, raw: Any, where: str) -> Property:
        if not isinstance(raw, dict) or 'type' not in raw:
            raise DeclarationFormatError(
                f"Property '{where}' in {self.source.file} has no 'type'"
            )

        cached = self._properties.get(id(raw))
        if cached is not None and cached.name == name:
            return cached

        prop = Property(name=name, type=TypeNode(), origin=self._origin_of(raw, where))
        self._properties[id(raw)] = prop
        prop.type = self._convert_node(raw['type'], where)
        return prop

    def _convert_call(self, raw: Any, where: str) -> CallSignature:
        if not isinstance(raw, dict):
            raise DeclarationFormatError(
                f"Call signature of '{where}' in {self.source.file} must be a mapping"
            )
        parameters = []
        for raw_param in self._field(raw, 'parameters', list, where):
            if not isinstance(raw_param, dict) or 'name' not in raw_param:
                raise DeclarationFormatError(
                    f"Parameter of '{where}' in {self.source.file} has no 'name'"
                )
            parameters.append(Parameter(name=str(raw_param['name'])))
        return CallSignature(parameters=parameters)


def load_environment(sources: Iterable[DeclarationSource],
                     logger: Optional[StubLogger] = None) -> Dict[str, EnvEntry]:
    """Merge the environments of all sources, in order

    A later source's entry replaces an earlier entry of the same name.

    Args:
        sources: Declaration sources, base declarations first
        logger: Optional logger receiving a warning per replaced entry

    Returns:
        Flat environment mapping symbol names to EnvEntry
    """
    env: Dict[str, EnvEntry] = {}
    for source in sources:
        for name, entry in DeclarationLoader(source).load().items():
            if name in env and logger:
                logger.log_warning(f"'{name}' from {source.file} replaces an earlier declaration")
            env[name] = entry
    return env
