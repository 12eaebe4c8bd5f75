"""
Module Data Models - Structured summary of a Terraform module's requirements.

A Module accumulates the declarations of every file in a directory:
the required core versions and the required providers, merged across
files in processing order.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional

from ...core.errors import ConflictingProviderSourceError


@dataclass
class ProviderRef:
    """Reference to a provider configuration by base name and alias."""
    name: str = ""
    alias: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'alias': self.alias}


@dataclass
class ProviderRequirement:
    """A declared dependency on a provider plugin."""
    source: str = ""  # empty until some file declares it
    version_constraints: List[str] = field(default_factory=list)
    # Not populated by any extractor
    configuration_aliases: List[ProviderRef] = field(default_factory=list)

    @classmethod
    def new(cls, source: str, version_constraints: List[str]) -> 'ProviderRequirement':
        return cls(source=source, version_constraints=list(version_constraints))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'version_constraints': list(self.version_constraints),
            'configuration_aliases': [ref.to_dict() for ref in self.configuration_aliases],
        }


@dataclass
class Module:
    """
    Accumulated requirements of one configuration directory.

    Created empty at the start of a load and mutated once per file.
    """
    path: Path = field(default_factory=Path)
    required_core: List[str] = field(default_factory=list)
    required_providers: Dict[str, ProviderRequirement] = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.path, str):
            self.path = Path(self.path)

    @classmethod
    def new(cls, path: Path | str) -> 'Module':
        """Create an empty module bound to a directory."""
        return cls(path=Path(path))

    def add_required_core(self, constraint: str) -> None:
        """Record a required_version constraint."""
        self.required_core.append(constraint)

    def add_provider_requirement(
        self,
        name: str,
        requirement: ProviderRequirement,
        file_name: Optional[Path] = None,
    ) -> ProviderRequirement:
        """
        Merge a provider requirement into the module.

        The first non-empty source wins; a later empty source never
        overwrites it. Two non-empty sources that differ are a conflict.
        Version constraints are always appended.

        Args:
            name: Provider name (the required_providers attribute key)
            requirement: Requirement extracted from one file
            file_name: File the requirement came from, for error reporting

        Returns:
            The merged requirement stored in the module

        Raises:
            ConflictingProviderSourceError: If the sources conflict
        """
        existing = self.required_providers.get(name)
        if existing is None:
            self.required_providers[name] = requirement
            return requirement

        if existing.source and requirement.source and existing.source != requirement.source:
            raise ConflictingProviderSourceError(
                provider_name=name,
                existing_source=existing.source,
                new_source=requirement.source,
                file_name=file_name,
            )

        existing.version_constraints.extend(requirement.version_constraints)
        if not existing.source:
            existing.source = requirement.source

        return existing

    def summary(self) -> str:
        """Get a one-line summary of the module."""
        return (
            f"{len(self.required_core)} core constraint(s), "
            f"{len(self.required_providers)} provider(s)"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            'path': str(self.path),
            'required_core': list(self.required_core),
            'required_providers': {
                name: req.to_dict() for name, req in self.required_providers.items()
            },
        }
