from collections import defaultdict
from enum import Enum
from typing import TYPE_CHECKING, Union

from .syntax import create_dictionary_string as pdf_dict

if TYPE_CHECKING:
    from .fonts import CoreFont
    from .image_datastructures import ImageXObject
    from .registry import ObjectRegistry

ResourceTypes = Union["CoreFont", "ImageXObject"]


class PDFResourceType(Enum):
    FONT = "Font"
    X_OBJECT = "XObject"


# From section 10.1, "Procedure sets", of ISO 32000-1 (PDF 1.7):
# > Beginning with PDF 1.4, this feature is considered obsolete.
# > For compatibility with existing consumer applications,
# > PDF producer applications should continue to specify procedure sets
PROC_SET = "[/PDF /Text /ImageB /ImageC /ImageI]"


class ResourceCatalog:
    """
    Manage the indexing of resources and association to the pages they are used.
    Only resources that a page's content stream actually references end up
    in that page's /Resources dictionary.
    """

    def __init__(self) -> None:
        self.resources_per_page: dict[
            tuple[int, PDFResourceType], dict[int, ResourceTypes]
        ] = defaultdict(dict)

    def add(
        self, resource_type: PDFResourceType, resource: ResourceTypes, page_id: int
    ) -> None:
        self.resources_per_page[(page_id, resource_type)][resource.index()] = resource

    def uses_font(self, page_id: int, font: "CoreFont") -> None:
        self.add(PDFResourceType.FONT, font, page_id)

    def uses_image(self, page_id: int, image: "ImageXObject") -> None:
        self.add(PDFResourceType.X_OBJECT, image, page_id)

    def get_resources_per_page(
        self, page_id: int, resource_type: PDFResourceType
    ) -> dict[int, ResourceTypes]:
        return self.resources_per_page.get((page_id, resource_type), {})

    def resources_dict(self, page_id: int, registry: "ObjectRegistry") -> str:
        """
        Build the inline /Resources dictionary of one page.

        Raises:
            SerializationError: if a referenced font or image is not registered in `registry`
        """
        resources = {"/ProcSet": PROC_SET}
        fonts = self.get_resources_per_page(page_id, PDFResourceType.FONT)
        if fonts:
            resources["/Font"] = pdf_dict(
                {
                    f"/F{index}": registry.require(font)
                    for index, font in sorted(fonts.items())
                },
                field_join=" ",
            )
        images = self.get_resources_per_page(page_id, PDFResourceType.X_OBJECT)
        if images:
            resources["/XObject"] = pdf_dict(
                {
                    f"/Image{index}": registry.require(image)
                    for index, image in sorted(images.items())
                },
                field_join=" ",
            )
        return pdf_dict(resources, field_join=" ")
