"""Declaration table for dtsstub

Splits the front end's flat symbol environment into module-qualified and
plain top-level symbols, keeping only those declared by the file under
processing.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from dtsstub.core.classifier import TypeNodeClassifier
from dtsstub.core.type_nodes import EnvEntry

DEFAULT_MODULE_PREFIX = "module:"


@dataclass
class DeclarationTable:
    """Root set for stub traversal

    Attributes:
        modules: Module name (prefix stripped) to entry
        env: Plain top-level name to entry
    """
    modules: Dict[str, EnvEntry] = field(default_factory=dict)
    env: Dict[str, EnvEntry] = field(default_factory=dict)

    def is_top_level(self, scope: str) -> bool:
        """Check if scope names a root symbol"""
        return scope in self.modules or scope in self.env

    def module_names(self) -> List[str]:
        """Module names in lexicographic order"""
        return sorted(self.modules)

    def env_names(self) -> List[str]:
        """Top-level names in lexicographic order"""
        return sorted(self.env)


class DeclarationTableBuilder:
    """Builds a DeclarationTable from a flat environment"""

    def __init__(self, module_prefix: str = DEFAULT_MODULE_PREFIX) -> None:
        """Initialize builder

        Args:
            module_prefix: Name prefix the front end gives module symbols
        """
        self.module_prefix = module_prefix

    def build(self, env: Mapping[str, EnvEntry], origin: str) -> DeclarationTable:
        """Partition environment entries declared by origin

        Args:
            env: Flat environment from the front end
            origin: Identifier of the file under processing

        Returns:
            DeclarationTable holding only origin's symbols
        """
        table = DeclarationTable()
        for name, entry in env.items():
            if not TypeNodeClassifier.is_from_origin(origin, entry.object):
                continue
            if name.startswith(self.module_prefix):
                table.modules[name[len(self.module_prefix):]] = entry
            else:
                table.env[name] = entry
        return table
