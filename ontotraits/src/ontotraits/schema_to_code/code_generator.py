"""
Renders the resolved class models into Python trait and class modules using Jinja2 templates, and
writes them to the target folder.
"""

from __future__ import annotations

import glob
import os
from dataclasses import dataclass, field

from jinja2 import Environment, FileSystemLoader
from jinja2.ext import loopcontrols
from typing_extensions import Dict, List

from .schema_info import ClassModel, GenerationResult
from .. import logger

TRAITS_FOLDER = "traits"


def docstring_safe(text: str) -> str:
    """Escape text so it can be placed inside a triple-quoted docstring."""
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


class JinjaRenderer:
    """Renderer for generating Python code using Jinja2 templates."""

    def __init__(self, template_dir: str):
        """
        Initialize the renderer.
        :param template_dir: Directory containing Jinja2 templates.
        """
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            extensions=[loopcontrols],
        )
        self.env.filters["docstring"] = docstring_safe

    def render(self, template_name: str, **context) -> str:
        """
        Render a template with the given context.
        :param template_name: Name of the template file.
        :param context: Keyword arguments for the template context.
        :return: Rendered string.
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


@dataclass
class CodeGenerator:
    """
    Turns a generation result into file contents: one trait module per required class, one class module
    per requested class, and the package `__init__` modules.
    """

    result: GenerationResult
    namespace: str
    """
    The Python package the generated folder is importable as.
    """
    see_url: str = "https://schema.org/"
    renderer: JinjaRenderer = field(init=False)

    def __post_init__(self):
        self.renderer = JinjaRenderer(os.path.join(os.path.dirname(__file__), "jinja"))

    def generate(self) -> Dict[str, str]:
        """
        :return: Dictionary mapping file paths (relative to the target folder) to their rendered content.
        """
        files: Dict[str, str] = {}
        for cls in self.result.classes:
            files[self.trait_path(cls)] = self.render_trait(cls)
        for cls in self.requested_classes():
            files[self.class_path(cls)] = self.render_class(cls)

        files[os.path.join(TRAITS_FOLDER, "__init__.py")] = self.renderer.render(
            "package_init.py.j2",
            title="Traits of all generated classes.",
            package=f"{self.namespace}.{TRAITS_FOLDER}",
            exports=[(c.trait_module_name, c.trait_name) for c in self.result.classes],
        )
        files["__init__.py"] = self.renderer.render(
            "package_init.py.j2",
            title="Generated classes.",
            package=self.namespace,
            exports=[(c.module_name, c.class_name) for c in self.requested_classes()],
        )
        return files

    def requested_classes(self) -> List[ClassModel]:
        by_name = self.result.by_name
        return [by_name[name] for name in self.result.requested]

    def render_trait(self, cls: ClassModel) -> str:
        return self.renderer.render(
            "trait.py.j2",
            cls=cls,
            properties=list(cls.properties.values()),
            see=f"{self.see_url}{cls.name}",
        )

    def render_class(self, cls: ClassModel) -> str:
        by_name = self.result.by_name
        return self.renderer.render(
            "class.py.j2",
            cls=cls,
            namespace=self.namespace,
            traits=[by_name[t] for t in cls.traits],
            see=f"{self.see_url}{cls.name}",
        )

    @staticmethod
    def trait_path(cls: ClassModel) -> str:
        return os.path.join(TRAITS_FOLDER, f"{cls.trait_module_name}.py")

    @staticmethod
    def class_path(cls: ClassModel) -> str:
        return f"{cls.module_name}.py"


@dataclass
class ArtifactWriter:
    """Writes rendered modules into the target folder."""

    folder: str

    @property
    def traits_folder(self) -> str:
        return os.path.join(self.folder, TRAITS_FOLDER)

    def prepare(self, remove_old: bool = False) -> List[str]:
        """
        Create the target folders and optionally remove previously generated modules.

        :param remove_old: Whether to delete the existing `*.py` files of the folder and its traits folder.
        :return: The removed files.
        """
        os.makedirs(self.traits_folder, exist_ok=True)
        removed = []
        if remove_old:
            for folder in (self.folder, self.traits_folder):
                for path in sorted(glob.glob(os.path.join(folder, "*.py"))):
                    os.remove(path)
                    removed.append(path)
            logger.debug(f"[writer]: removed {len(removed)} old files")
        return removed

    def write(self, files: Dict[str, str]) -> List[str]:
        """
        :param files: Relative path -> content.
        :return: The written paths.
        """
        written = []
        for relative_path, content in files.items():
            path = os.path.join(self.folder, relative_path)
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
            written.append(path)
        return written
