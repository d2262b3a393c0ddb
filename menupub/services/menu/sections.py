"""
Section Builder

Turns one category bundle into the ordered sections a template renders:

1. items of the "general" subcategory, without a heading
2. the other subcategories, in their stored order
3. every special item, pooled into one Specials section
4. the add-ons, pooled into one trailing Supplements section

Within a section records are sorted by `order`; ties keep fetch order.
Empty sections are never emitted.
"""
from typing import Any, Iterable, List, Optional, Union

from menupub.core.constants import Language, DEFAULT_LANGUAGE, GENERAL_SUBCATEGORY_MARKER
from menupub.schemas.section import DisplayItem, Section
from menupub.services.menu.localization import read_attr, resolve_field
from menupub.services.menu.pricing import format_price


def is_general_subcategory(subcategory: Any) -> bool:
    # Naming convention on the French title, not a typed flag
    title = read_attr(subcategory, "title") or ""
    return GENERAL_SUBCATEGORY_MARKER in str(title).lower()


def _order_key(record: Any) -> float:
    try:
        return float(read_attr(record, "order") or 0)
    except (TypeError, ValueError):
        return 0.0


def sort_by_order(records: Iterable[Any]) -> List[Any]:
    # sorted() is stable, so equal orders keep their fetch order
    return sorted(records, key=_order_key)


def _is_special(item: Any) -> bool:
    return bool(read_attr(item, "is_special"))


def item_to_display(item: Any, language: Union[Language, str]) -> DisplayItem:
    primary_url = read_attr(item, "model_3d_url") or None
    ar_url = read_attr(item, "redirect_3d_url") or None

    return DisplayItem(
        id=read_attr(item, "id"),
        image=read_attr(item, "image_path") or None,
        title=resolve_field(item, "title", language),
        subtitle=resolve_field(item, "text", language) or resolve_field(item, "description", language),
        price_label=format_price(read_attr(item, "price")),
        has_3d=bool(primary_url or ar_url),
        model_3d_primary_url=primary_url,
        model_3d_ar_url=ar_url,
    )


def addon_to_display(addon: Any, language: Union[Language, str]) -> DisplayItem:
    # Add-ons never carry 3D assets
    return DisplayItem(
        id=read_attr(addon, "id"),
        image=read_attr(addon, "image_path") or None,
        title=resolve_field(addon, "title", language),
        subtitle=resolve_field(addon, "description", language),
        price_label=format_price(read_attr(addon, "price")),
        has_3d=False,
    )


def build_sections(
    bundle: Optional[Any],
    language: Union[Language, str] = DEFAULT_LANGUAGE,
    specials_label: str = "",
    supplements_label: str = "",
    specials_in_subcategories: bool = False,
) -> List[Section]:
    """
    Build the display sections for one category bundle.

    Args:
        bundle: MenuBundle (or any object/mapping with `subcategories`,
            `menu_items` and `addons`). None means nothing is loaded yet.
        language: active display language.
        specials_label / supplements_label: headings of the pooled sections.
        specials_in_subcategories: when True, special items of custom
            subcategories are also listed under their subcategory heading
            (they always appear in the Specials section).

    Returns:
        Ordered list of sections; empty when the bundle is missing.
    """
    if bundle is None:
        return []

    subcategories = list(read_attr(bundle, "subcategories") or [])
    menu_items = list(read_attr(bundle, "menu_items") or [])
    addons = list(read_attr(bundle, "addons") or [])

    sections: List[Section] = []

    # 1. General subcategory, no heading
    general = next((s for s in subcategories if is_general_subcategory(s)), None)
    if general is not None:
        general_id = read_attr(general, "id")
        general_items = sort_by_order(
            item for item in menu_items
            if read_attr(item, "subcategory_id") == general_id and not _is_special(item)
        )
        if general_items:
            sections.append(Section(
                title="",
                subtitle=None,
                items=[item_to_display(item, language) for item in general_items],
            ))

    # 2. Custom subcategories
    custom_subcategories = sort_by_order(s for s in subcategories if not is_general_subcategory(s))
    for subcategory in custom_subcategories:
        subcategory_id = read_attr(subcategory, "id")
        subcategory_items = sort_by_order(
            item for item in menu_items
            if read_attr(item, "subcategory_id") == subcategory_id
            and (specials_in_subcategories or not _is_special(item))
        )
        if not subcategory_items:
            continue
        sections.append(Section(
            title=resolve_field(subcategory, "title", language),
            subtitle=resolve_field(subcategory, "text", language) or None,
            items=[item_to_display(item, language) for item in subcategory_items],
        ))

    # 3. Specials, across every subcategory
    special_items = sort_by_order(item for item in menu_items if _is_special(item))
    if special_items:
        sections.append(Section(
            title=specials_label,
            subtitle=None,
            is_special=True,
            items=[item_to_display(item, language) for item in special_items],
        ))

    # 4. Supplements
    if addons:
        sections.append(Section(
            title=supplements_label,
            subtitle=None,
            items=[addon_to_display(addon, language) for addon in sort_by_order(addons)],
        ))

    return sections
