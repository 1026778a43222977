"""Lightweight validation of plugin options against the PluginConfig schema."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Union, get_args, get_origin

from .schema import PluginConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


class ConfigValidator:
    """Validate option types; unknown host options are ignored."""

    _ROOT_SCHEMA = PluginConfig

    @classmethod
    def validate(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        """Validate a configuration dictionary and return a list of errors."""
        if not isinstance(config, MappingABC):
            return [
                ValidationError(
                    path="<root>",
                    message="Expected a mapping for the plugin configuration",
                )
            ]

        annotations = cls._collect_annotations(cls._ROOT_SCHEMA)
        errors: List[ValidationError] = []
        for key in sorted(config.keys()):
            annotation = annotations.get(key)
            value = config[key]
            # None means "unset" and is filled from the defaults.
            if annotation is None or value is None:
                continue
            errors.extend(cls._validate_annotation(value, annotation, path=key))
        return errors

    @staticmethod
    def format_errors(errors: List[ValidationError]) -> str:
        details = "\n".join(f"- {err.path}: {err.message}" for err in errors)
        return f"Configuration validation failed:\n{details}"

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _validate_annotation(cls, value: Any, annotation: Any, path: str) -> List[ValidationError]:
        if not cls._matches_type(value, annotation):
            expected = cls._describe_annotation(annotation)
            actual = type(value).__name__
            return [
                ValidationError(
                    path=path,
                    message=f"Expected {expected}, got {actual}",
                )
            ]

        if get_origin(annotation) in cls._MAPPING_ORIGINS:
            _, value_annotation = cls._mapping_args(annotation)
            errors: List[ValidationError] = []
            for key, item in value.items():
                errors.extend(cls._validate_annotation(item, value_annotation, f"{path}.{key}"))
            return errors
        return []

    @classmethod
    def _matches_type(cls, value: Any, annotation: Any) -> bool:
        if annotation is Any:
            return True

        origin = get_origin(annotation)

        if origin is Union:
            return any(cls._matches_type(value, option) for option in get_args(annotation))

        if origin is Literal:
            return value in get_args(annotation)

        if origin in cls._MAPPING_ORIGINS:
            return isinstance(value, MappingABC)

        if isinstance(annotation, type):
            if annotation in (int, float):
                return isinstance(value, (int, float)) and not isinstance(value, bool)
            return isinstance(value, annotation)

        return True

    @staticmethod
    def _collect_annotations(schema: type[dict]) -> Dict[str, Any]:
        annotations: Dict[str, Any] = {}
        for base in reversed(schema.__mro__):
            annotations.update(getattr(base, "__annotations__", {}))
        return annotations

    @classmethod
    def _mapping_args(cls, annotation: Any) -> tuple[Any, Any]:
        args = get_args(annotation)
        if len(args) == 2:
            return args[0], args[1]
        return Any, Any

    @classmethod
    def _describe_annotation(cls, annotation: Any) -> str:
        if annotation is Any:
            return "any type"
        origin = get_origin(annotation)
        if origin is Union:
            options = " | ".join(cls._describe_annotation(opt) for opt in get_args(annotation))
            return f"({options})"
        if origin is Literal:
            values = ", ".join(repr(arg) for arg in get_args(annotation))
            return f"literal ({values})"
        if origin in cls._MAPPING_ORIGINS:
            key_ann, value_ann = cls._mapping_args(annotation)
            return f"mapping[{cls._describe_annotation(key_ann)} -> {cls._describe_annotation(value_ann)}]"
        if isinstance(annotation, type):
            return annotation.__name__
        return str(annotation)

    _MAPPING_ORIGINS = {
        dict,
        MappingABC,
    }
