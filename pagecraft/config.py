"""Workspace configuration support for pagecraft exports."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .errors import ConfigError

if TYPE_CHECKING:
    from .export.registry import ExportTemplateRegistry

CONFIG_FILE_NAMES = ("pagecraft.toml", ".pagecraftrc")


@dataclass(frozen=True)
class StaticExportOptions:
    """Options for the static HTML target.

    ``include_css``/``include_js`` link the shared ``css/styles.css`` and
    ``js/main.js`` files; when disabled the assets are inlined.
    """

    include_css: bool = True
    include_js: bool = True
    minify: bool = False
    site_name: str = "My Site"


SINGLE_PAGE_OPTIONS = StaticExportOptions(include_css=False, include_js=False)


@dataclass(frozen=True)
class ServerProjectOptions:
    """Coordinates and versions written into the server project scaffold."""

    project_name: str = "my-site"
    group_id: str = "com.example"
    artifact_id: str = "my-site"
    version: str = "1.0.0"
    spring_boot_version: str = "3.2.0"
    java_version: str = "21"
    runtime_version: str = "1.0.0-SNAPSHOT"
    server_port: int = 8080


@dataclass(frozen=True)
class ExportSettings:
    max_workers: int = 4
    output_dir: Path = Path("dist")


@dataclass(frozen=True)
class PluginTemplateConfig:
    """Export template declared in configuration instead of a plugin manifest."""

    component_id: str
    plugin_id: str
    static_template: Optional[str] = None
    server_template: Optional[str] = None
    supports_children: bool = False
    wrapper_tag: Optional[str] = None
    css_classes: Tuple[str, ...] = ()

    def export_metadata(self) -> Dict[str, Any]:
        return {
            "supportsChildren": self.supports_children,
            "wrapperTag": self.wrapper_tag,
            "cssClasses": list(self.css_classes),
        }


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    static: StaticExportOptions = field(default_factory=StaticExportOptions)
    server: ServerProjectOptions = field(default_factory=ServerProjectOptions)
    export: ExportSettings = field(default_factory=ExportSettings)
    plugins: List[PluginTemplateConfig] = field(default_factory=list)
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def register_plugins(self, registry: "ExportTemplateRegistry") -> int:
        """Register every configured plugin template; returns how many were accepted."""

        from .export.core_templates import register_plugin_export_template

        count = 0
        for plugin in self.plugins:
            if register_plugin_export_template(
                registry,
                plugin.component_id,
                plugin.plugin_id,
                static_template=plugin.static_template,
                server_template=plugin.server_template,
                export_metadata=plugin.export_metadata(),
            ):
                count += 1
        return count


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _section(data: Dict[str, Any], name: str, source: Path) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a table", path=str(source))
    return section


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _as_int(section: Dict[str, Any], key: str, default: int, source: Path, minimum: int = 0) -> int:
    raw = section.get(key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{key}' must be an integer, got {raw!r}", path=str(source)) from exc
    if value < minimum:
        raise ConfigError(f"'{key}' must be at least {minimum}, got {value}", path=str(source))
    return value


def _parse_static(data: Dict[str, Any], source: Path) -> StaticExportOptions:
    section = _section(data, "static", source)
    defaults = StaticExportOptions()
    return StaticExportOptions(
        include_css=_as_bool(section.get("include_css"), defaults.include_css),
        include_js=_as_bool(section.get("include_js"), defaults.include_js),
        minify=_as_bool(section.get("minify"), defaults.minify),
        site_name=str(section.get("site_name") or defaults.site_name),
    )


def _parse_server(data: Dict[str, Any], source: Path) -> ServerProjectOptions:
    section = _section(data, "server", source)
    defaults = ServerProjectOptions()
    values = {
        key: str(section.get(key) or getattr(defaults, key))
        for key in (
            "project_name",
            "group_id",
            "artifact_id",
            "version",
            "spring_boot_version",
            "java_version",
            "runtime_version",
        )
    }
    return ServerProjectOptions(
        server_port=_as_int(section, "server_port", defaults.server_port, source, minimum=1),
        **values,
    )


def _parse_export(data: Dict[str, Any], source: Path, root: Path) -> ExportSettings:
    section = _section(data, "export", source)
    output_dir = Path(section.get("output_dir") or ExportSettings.output_dir)
    if not output_dir.is_absolute():
        output_dir = (root / output_dir).resolve()
    return ExportSettings(
        max_workers=_as_int(section, "max_workers", ExportSettings.max_workers, source, minimum=1),
        output_dir=output_dir,
    )


def _parse_plugins(data: Dict[str, Any], source: Path) -> List[PluginTemplateConfig]:
    entries = data.get("plugins") or []
    if not isinstance(entries, list):
        raise ConfigError("'plugins' must be a list of tables", path=str(source))
    plugins: List[PluginTemplateConfig] = []
    for position, raw in enumerate(entries):
        if not isinstance(raw, dict):
            raise ConfigError(f"plugins[{position}] must be a table", path=str(source))
        component_id = raw.get("component_id")
        plugin_id = raw.get("plugin_id")
        if not component_id or not plugin_id:
            raise ConfigError(
                f"plugins[{position}] requires 'component_id' and 'plugin_id'",
                path=str(source),
            )
        css_classes = raw.get("css_classes") or ()
        if isinstance(css_classes, str):
            css_classes = css_classes.split()
        plugins.append(
            PluginTemplateConfig(
                component_id=str(component_id),
                plugin_id=str(plugin_id),
                static_template=raw.get("static_template"),
                server_template=raw.get("server_template"),
                supports_children=_as_bool(raw.get("supports_children"), False),
                wrapper_tag=raw.get("wrapper_tag"),
                css_classes=tuple(str(name) for name in css_classes),
            )
        )
    return plugins


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    """Load ``pagecraft.toml`` / ``.pagecraftrc`` from ``root``; defaults when absent.

    Raises:
        ConfigError: if an explicit file is missing or any file is malformed.
    """

    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        if explicit is not None:
            raise ConfigError("Configuration file not found", path=str(explicit))
        return WorkspaceConfig(root=root)

    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Cannot parse configuration: {exc}", path=str(config_path)) from exc
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a table", path=str(config_path))

    return WorkspaceConfig(
        root=root,
        static=_parse_static(data, config_path),
        server=_parse_server(data, config_path),
        export=_parse_export(data, config_path, root),
        plugins=_parse_plugins(data, config_path),
        source=config_path,
        raw=data,
    )


def apply_overrides(options: Any, **overrides: Any) -> Any:
    """Return a copy of a frozen options object with non-``None`` overrides applied."""

    values = {key: value for key, value in overrides.items() if value is not None}
    return replace(options, **values) if values else options


__all__ = [
    "CONFIG_FILE_NAMES",
    "StaticExportOptions",
    "SINGLE_PAGE_OPTIONS",
    "ServerProjectOptions",
    "ExportSettings",
    "PluginTemplateConfig",
    "WorkspaceConfig",
    "locate_config_file",
    "load_workspace_config",
    "apply_overrides",
]
