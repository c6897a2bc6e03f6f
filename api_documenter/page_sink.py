"""Interface of the component that receives finished pages."""

from typing import Protocol

from api_documenter.markup import MarkupPage


class PageSink(Protocol):
    """Destination for generated pages."""

    @property
    def output_file_extension(self) -> str: ...

    def delete_output_files(self) -> None:
        """Remove output left over from a previous run."""
        ...

    def write_page(self, page: MarkupPage) -> None:
        """Take ownership of a finished page."""
        ...
