"""Pydantic models for dump configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ParserName = Literal["html.parser", "xml"]


class DumpConfig(BaseModel):
    """Settings read from a domdump YAML file."""

    parser: ParserName = Field(
        "html.parser",
        description=(
            "Tree provider: 'html.parser' parses with BeautifulSoup, "
            "'xml' parses well-formed XML with xml.dom.minidom."
        ),
    )
    assume_xhtml: bool = Field(
        True,
        alias="assumeXhtml",
        description="Place elements the parser leaves without a namespace in the XHTML namespace.",
    )
    strip_bom: bool = Field(
        True,
        alias="stripBom",
        description="Drop a leading byte-order mark before parsing.",
    )
    encoding: str = Field(
        "utf-8", description="Encoding used to read input files and write output files."
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")
