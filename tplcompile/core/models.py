"""Domain models for the encode and compile flows."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class EncodedTemplate(BaseModel):
    """A single source template converted to its encoded sibling."""

    source_path: Path = Field(..., description="Deleted source template")
    encoded_path: Path = Field(..., description="Written .mustache file")
    sidecar_path: Path = Field(..., description="Written sidecar key pair file")


class EncodeResult(BaseModel):
    """Outcome of one encode run."""

    dialect: str
    extension: str
    templates: list[EncodedTemplate] = Field(default_factory=list)
    added_keys: dict[str, str] = Field(
        default_factory=dict, description="Entries appended to the global data mapping"
    )


class CompileTarget(BaseModel):
    """A routed descriptor: where its generated markup lives and where it goes."""

    descriptor_path: Path = Field(..., description="Descriptor .yml file")
    pattern_id: str = Field(..., description="Flattened pattern identifier")
    markup_path: Path = Field(..., description="Generated markup-only file")
    dest_path: Path = Field(..., description="Compiled backend file")


class CompileResult(BaseModel):
    """Outcome of one compile run."""

    compiled: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
    failed: list[Path] = Field(default_factory=list)


class FormatterOptions(BaseModel):
    """Pretty-printer options, read from a js-beautify style rc file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    indent_size: int = Field(default=2, ge=0)
    indent_char: str = " "
    indent_with_tabs: bool = False
    end_with_newline: bool = True
    void_element_slash: bool = False
    parser: str = "html.parser"

    @property
    def indent(self) -> str:
        if self.indent_with_tabs:
            return "\t"
        return self.indent_char * self.indent_size
