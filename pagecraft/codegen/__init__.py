"""Tree-walking code generators.

``pagecraft.codegen.static`` produces self-contained HTML sites and
``pagecraft.codegen.server`` produces server-rendered project scaffolds.
Both consult an :class:`~pagecraft.export.ExportTemplateRegistry` before
falling back to their built-in emitters.
"""
