from __future__ import annotations

import uuid
from typing import Any, Iterable, Mapping

from .attributes import merge_attributes
from .classes import combine_classes
from .core import ElementNode, component
from .kinds import ElementKind, generic
from .pseudo import PseudoAttributes

# Element kinds are plain declarations. Composite components below consume
# their pseudo-attributes first and build these kinds from what remains.

BUTTON_VARIANT_CLASSES = (
    "btn-primary btn-secondary btn-success btn-info btn-warning btn-danger "
    "btn-light btn-dark btn-outline-primary btn-outline-secondary "
    "btn-outline-success btn-outline-info btn-outline-warning "
    "btn-outline-danger btn-outline-light btn-outline-dark btn-link"
)

CONTAINER = ElementKind(
    "div",
    {"class": "container"},
    groups=("container container-sm container-md container-lg container-xl container-xxl container-fluid",),
)

FOOTER = ElementKind("footer")

FORM = ElementKind("form", {"spellcheck": "false", "autocorrect": "off"})

LABEL = ElementKind("label", {"for": ""})

FORM_LABEL = ElementKind(
    "label",
    {"class": "form-label", "for": ""},
    groups=("form-label form-check-label",),
)

FORM_CHECK_LABEL = FORM_LABEL.derive(default_attributes={"class": "form-check-label"})

FORM_HELP_TEXT = ElementKind("div", {"id": "", "class": "form-text"})

BUTTON = ElementKind(
    "button",
    {"type": "button", "class": "btn btn-primary"},
    groups=(BUTTON_VARIANT_CLASSES, "btn-lg btn-sm"),
)

BUTTON_GROUP = ElementKind(
    "div",
    {"class": "btn-group", "role": "group", "aria-label": ""},
    groups=("btn-group btn-group-vertical", "btn-group-lg btn-group-sm"),
)

BUTTON_TOOLBAR = ElementKind("div", {"class": "btn-toolbar", "role": "toolbar", "aria-label": ""})

NAVBAR = ElementKind(
    "nav",
    {"class": "navbar bg-body-tertiary"},
    groups=(
        "navbar-expand navbar-expand-sm navbar-expand-md navbar-expand-lg navbar-expand-xl navbar-expand-xxl",
        "bg-body-tertiary bg-primary bg-secondary bg-success bg-info bg-warning bg-danger bg-light bg-dark",
    ),
)

NAVBAR_NAV = ElementKind("ul", {"class": "navbar-nav"})

COLLAPSE = ElementKind("div", {"class": "collapse"})

NAVBAR_COLLAPSE = COLLAPSE.derive(default_attributes={"class": "navbar-collapse"})

NAVBAR_TOGGLER = BUTTON.derive(
    default_attributes={
        "class": "-btn -btn-primary navbar-toggler",
        "data-bs-toggle": "collapse",
        "data-bs-target": "",
        "aria-controls": "",
        "aria-expanded": "false",
        "aria-label": "Toggle navigation",
    }
)

NAVBAR_ITEM = ElementKind("li", {"class": "nav-item"})

NAVBAR_DROPDOWN = ElementKind("li", {"class": "nav-item dropdown"})

LIST_ITEM = ElementKind("li")

SPINNER = ElementKind(
    "div",
    {"class": "spinner-border", "role": "status"},
    groups=(
        "spinner-border spinner-grow",
        "spinner-border spinner-grow-sm",
        "spinner-border-sm spinner-grow",
        "spinner-border-sm spinner-grow-sm",
    ),
)

MODAL = ElementKind(
    "div",
    {"class": "modal", "aria-hidden": "true", "aria-labelledby": "", "tabindex": "-1"},
)

FORM_CONTROL = ElementKind(
    "input",
    {"class": "form-control"},
    groups=("form-control form-control-plaintext form-check-input", "form-control-lg form-control-sm"),
    self_closing=True,
)

FORM_TEXT_INPUT = FORM_CONTROL.derive(default_attributes={"type": "text"})
FORM_EMAIL_INPUT = FORM_CONTROL.derive(default_attributes={"type": "email"})
FORM_PASSWORD_INPUT = FORM_CONTROL.derive(default_attributes={"type": "password"})
FORM_HIDDEN_INPUT = ElementKind("input", {"type": "hidden"}, self_closing=True)
FORM_CHECK_INPUT = FORM_CONTROL.derive(default_attributes={"class": "form-check-input", "type": "checkbox"})
FORM_SWITCH_INPUT = FORM_CONTROL.derive(
    default_attributes={"class": "form-check-input", "type": "checkbox", "role": "switch", "switch": True}
)
FORM_RADIO_INPUT = FORM_CONTROL.derive(default_attributes={"class": "form-check-input", "type": "radio"})

FORM_SELECT_CONTROL = FORM_CONTROL.derive(
    tag_name="select",
    self_closing=False,
    default_attributes={"class": "-form-control form-select"},
    groups=("form-select-lg form-select-sm",),
)

FORM_TEXTAREA_CONTROL = FORM_CONTROL.derive(tag_name="textarea", self_closing=False)

OPTION = ElementKind("option")

FORM_STANDARD_COMPOSITE = ElementKind("div", {"class": "mb-3"})
FORM_CHECK_COMPOSITE = ElementKind("div", {"class": "form-check"})
FORM_SWITCH_COMPOSITE = ElementKind("div", {"class": combine_classes("form-check", "form-switch")})
FORM_FLOATING_LABEL_COMPOSITE = ElementKind("div", {"class": "form-floating mb-3"})

PILL_TAB = ElementKind(
    "button",
    {
        "id": "",
        "class": "nav-link",
        "type": "button",
        "role": "tab",
        "data-bs-toggle": "pill",
        "data-bs-target": "#",
        "aria-controls": "",
        "aria-selected": "",
    },
)

TAB_PANES = ElementKind("div", {"class": "tab-content"})

VERTICAL_PILL_TABS = ElementKind(
    "div",
    {"class": "nav nav-pills flex-column me-3", "role": "tablist", "aria-orientation": "vertical"},
)

VERTICAL_PILL_TAB_LAYOUT = ElementKind("div", {"class": "d-flex align-items-start"})


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:13]}"


def _add_classes(attributes: dict[str, Any], *classes: str) -> None:
    existing = attributes.get("class")
    if isinstance(existing, bool):
        return
    merged = combine_classes(None if existing is None else str(existing), *classes)
    if merged:
        attributes["class"] = merged


@component
def Button(attributes: Mapping[str, Any] | None = None, content: Any = None) -> ElementNode:
    return BUTTON.build(attributes, content)


@component
def Spinner(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    bag = PseudoAttributes(attributes, component="Spinner")
    spinner_type = bag.consume(":type", "border")
    size = bag.consume(":size")
    label = bag.consume(":label", "Loading...")
    if spinner_type not in ("border", "grow"):
        spinner_type = "border"
    if size != "sm":
        size = None

    classes: list[str] = []
    if spinner_type == "grow":
        classes.append("spinner-grow")
    if size == "sm":
        classes.append(f"spinner-{spinner_type}-sm")

    attrs = bag.remaining()
    if classes:
        _add_classes(attrs, *classes)
    content = generic("span", {"class": "visually-hidden"}, label)
    return SPINNER.build(attrs, content)


@component
def Modal(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    bag = PseudoAttributes(attributes, component="Modal")
    title = bag.consume(":title", "")
    body = bag.consume(":body", "")
    secondary_label = bag.consume(":secondary-button-label", "Close")
    primary_label = bag.consume(":primary-button-label", "Save changes")
    footer = bag.consume(":footer")
    if footer is None:
        footer = [
            Button({"class": "btn-secondary", "data-bs-dismiss": "modal"}, secondary_label),
            Button(None, primary_label),
        ]
    dialog_attrs = merge_attributes(bag.consume_scoped("dialog"), {"class": "modal-dialog"})

    title_id = new_id("modal-title")
    attrs = bag.remaining()
    attrs["aria-labelledby"] = title_id

    header = generic(
        "div",
        {"class": "modal-header"},
        [
            generic("h5", {"class": "modal-title", "id": title_id}, title),
            generic(
                "button",
                {"type": "button", "class": "btn-close", "data-bs-dismiss": "modal", "aria-label": "Close"},
            ),
        ],
    )
    content = generic(
        "div",
        {"class": "modal-content"},
        [
            header,
            generic("div", {"class": "modal-body"}, body),
            generic("div", {"class": "modal-footer"}, footer),
        ],
    )
    return MODAL.build(attrs, generic("div", dialog_attrs, content))


@component
def NavbarToggler(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return NAVBAR_TOGGLER.build(attributes, generic("span", {"class": "navbar-toggler-icon"}))


def _nav_link(
    bag: PseudoAttributes,
    base_class: str,
    href: Any,
    *,
    active: bool = False,
    disabled: bool = False,
) -> dict[str, Any]:
    link = merge_attributes(bag.consume_scoped("link"), {"class": base_class, "href": href})
    if active:
        _add_classes(link, "active")
        link["aria-current"] = "page"
    if disabled:
        _add_classes(link, "disabled")
        link["aria-disabled"] = "true"
    return link


@component
def NavbarItem(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    bag = PseudoAttributes(attributes, component="NavbarItem")
    label = bag.consume(":label", "")
    href = bag.consume(":href", "#")
    active = bag.consume(":active", False)
    disabled = bag.consume(":disabled", False)
    link = _nav_link(bag, "nav-link", href, active=active, disabled=disabled)
    return NAVBAR_ITEM.build(bag.remaining(), generic("a", link, label))


@component
def NavbarDropdown(attributes: Mapping[str, Any] | None = None, items: Iterable[ElementNode] = ()) -> ElementNode:
    bag = PseudoAttributes(attributes, component="NavbarDropdown")
    label = bag.consume(":label", "")
    label_id = bag.consume(":label-id")
    disabled = bag.consume(":disabled", False)
    align_right = bag.consume(":align-right", False)

    link: dict[str, Any] = {
        "class": "nav-link dropdown-toggle",
        "href": "#",
        "role": "button",
        "data-bs-toggle": "dropdown",
        "aria-expanded": "false",
    }
    if label_id is not None:
        link["id"] = label_id
    if disabled:
        _add_classes(link, "disabled")
        link["aria-disabled"] = "true"
    menu_class = combine_classes("dropdown-menu", "dropdown-menu-end" if align_right else None)
    content = [
        generic("a", link, label),
        generic("ul", {"class": menu_class}, list(items)),
    ]
    return NAVBAR_DROPDOWN.build(bag.remaining(), content)


@component
def NavbarDropdownItem(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    bag = PseudoAttributes(attributes, component="NavbarDropdownItem")
    label = bag.consume(":label", "")
    href = bag.consume(":href", "#")
    disabled = bag.consume(":disabled", False)
    link = _nav_link(bag, "dropdown-item", href, disabled=disabled)
    return LIST_ITEM.build(bag.remaining(), generic("a", link, label))


@component
def NavbarDropdownDivider() -> ElementNode:
    return LIST_ITEM.build(None, generic("hr", {"class": "dropdown-divider"}, self_closing=True))


def _standard_composite(
    control: ElementKind,
    attributes: Mapping[str, Any] | None,
    component_name: str,
    control_content: Any = None,
) -> ElementNode:
    bag = PseudoAttributes(attributes, component=component_name)
    input_id = bag.consume(":id")
    name = bag.consume(":name")
    label = bag.consume(":label")
    help_text = bag.consume(":help")
    placeholder = bag.consume(":placeholder")
    disabled = bag.consume(":disabled", False)

    if input_id is None and label is not None:
        input_id = new_id("form-input")
    help_id = new_id("form-help") if help_text is not None else None

    control_defaults: dict[str, Any] = {}
    if input_id is not None:
        control_defaults["id"] = input_id
    if name is not None:
        control_defaults["name"] = name
    if help_id is not None:
        control_defaults["aria-describedby"] = help_id
    if placeholder is not None:
        control_defaults["placeholder"] = placeholder
    control_defaults["disabled"] = disabled
    control_attrs = merge_attributes(bag.consume_scoped("input"), control_defaults)

    content: list[ElementNode] = []
    if label is not None:
        content.append(FORM_LABEL.build({"for": control_attrs.get("id", "")}, label))
    content.append(control.build(control_attrs, control_content))
    if help_text is not None:
        content.append(FORM_HELP_TEXT.build({"id": help_id}, help_text))
    return FORM_STANDARD_COMPOSITE.build(bag.remaining(), content)


@component
def FormText(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return _standard_composite(FORM_TEXT_INPUT, attributes, "FormText")


@component
def FormEmail(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return _standard_composite(FORM_EMAIL_INPUT, attributes, "FormEmail")


@component
def FormPassword(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return _standard_composite(FORM_PASSWORD_INPUT, attributes, "FormPassword")


@component
def FormTextArea(attributes: Mapping[str, Any] | None = None, content: Any = None) -> ElementNode:
    return _standard_composite(FORM_TEXTAREA_CONTROL, attributes, "FormTextArea", content)


@component
def Option(value: Any, label: Any, *, selected: bool = False, **attributes: Any) -> ElementNode:
    return OPTION.build({"value": value, "selected": selected, **attributes}, str(label))


@component
def FormSelect(attributes: Mapping[str, Any] | None = None, options: Iterable[ElementNode] = ()) -> ElementNode:
    return _standard_composite(FORM_SELECT_CONTROL, attributes, "FormSelect", list(options))


def _floating_label_composite(
    control: ElementKind,
    attributes: Mapping[str, Any] | None,
    component_name: str,
    control_content: Any = None,
) -> ElementNode:
    """Input first, then its label, inside a ``form-floating`` wrapper.

    Floating labels only work when the control carries a placeholder, so an
    empty one is always set.
    """
    bag = PseudoAttributes(attributes, component=component_name)
    input_id = bag.consume(":id")
    name = bag.consume(":name")
    label = bag.consume(":label-text")
    help_text = bag.consume(":help-text")
    disabled = bag.consume(":disabled", False)

    if input_id is None and label is not None:
        input_id = new_id("form-input")
    help_id = new_id("form-help-text") if help_text is not None else None

    control_defaults: dict[str, Any] = {}
    if input_id is not None:
        control_defaults["id"] = input_id
    if name is not None:
        control_defaults["name"] = name
    if help_id is not None:
        control_defaults["aria-describedby"] = help_id
    control_defaults["placeholder"] = ""
    control_defaults["disabled"] = disabled
    control_attrs = merge_attributes(bag.consume_scoped("input"), control_defaults)

    content: list[ElementNode] = [control.build(control_attrs, control_content)]
    if label is not None:
        content.append(LABEL.build({"for": control_attrs.get("id", "")}, label))
    if help_text is not None:
        content.append(FORM_HELP_TEXT.build({"id": help_id}, help_text))
    return FORM_FLOATING_LABEL_COMPOSITE.build(bag.remaining(), content)


@component
def FormTextFL(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return _floating_label_composite(FORM_TEXT_INPUT, attributes, "FormTextFL")


@component
def FormTextAreaFL(attributes: Mapping[str, Any] | None = None, content: Any = None) -> ElementNode:
    return _floating_label_composite(FORM_TEXTAREA_CONTROL, attributes, "FormTextAreaFL", content)


def _checkable_composite(
    wrapper: ElementKind,
    control: ElementKind,
    attributes: Mapping[str, Any] | None,
    component_name: str,
) -> ElementNode:
    bag = PseudoAttributes(attributes, component=component_name)
    label = bag.consume(":label")
    help_text = bag.consume(":help")

    input_defaults: dict[str, Any] = {}
    if label is not None:
        input_defaults["id"] = new_id("form-input")
    if help_text is not None:
        input_defaults["aria-describedby"] = new_id("form-help")
    input_attrs = merge_attributes(bag.consume_scoped("input"), input_defaults)

    content: list[ElementNode] = [control.build(input_attrs)]
    if label is not None:
        label_defaults = {"for": input_attrs["id"]} if "id" in input_attrs else {}
        label_attrs = merge_attributes(bag.consume_scoped("label"), label_defaults)
        content.append(FORM_CHECK_LABEL.build(label_attrs, label))
    if help_text is not None:
        help_defaults = {"id": input_attrs["aria-describedby"]} if "aria-describedby" in input_attrs else {}
        help_attrs = merge_attributes(bag.consume_scoped("help"), help_defaults)
        content.append(FORM_HELP_TEXT.build(help_attrs, help_text))
    return wrapper.build(bag.remaining(), content)


@component
def FormCheck(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return _checkable_composite(FORM_CHECK_COMPOSITE, FORM_CHECK_INPUT, attributes, "FormCheck")


@component
def FormSwitch(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return _checkable_composite(FORM_SWITCH_COMPOSITE, FORM_SWITCH_INPUT, attributes, "FormSwitch")


@component
def FormRadio(attributes: Mapping[str, Any] | None = None) -> ElementNode:
    return _checkable_composite(FORM_CHECK_COMPOSITE, FORM_RADIO_INPUT, attributes, "FormRadio")


@component
def PillTab(attributes: Mapping[str, Any] | None = None, content: Any = None) -> ElementNode:
    bag = PseudoAttributes(attributes, component="PillTab")
    key = bag.require(":key")
    active = bag.consume(":active", False)
    pane_id = f"pane-{key}"

    attrs = bag.remaining()
    attrs.setdefault("id", f"tab-{key}")
    if active:
        if attrs.get("disabled") is True:
            active = False
        else:
            _add_classes(attrs, "active")
    attrs.setdefault("data-bs-target", f"#{pane_id}")
    attrs.setdefault("aria-controls", pane_id)
    attrs["aria-selected"] = "true" if active else "false"
    return PILL_TAB.build(attrs, content)


@component
def TabPane(attributes: Mapping[str, Any] | None = None, content: Any = None) -> ElementNode:
    bag = PseudoAttributes(attributes, component="TabPane")
    key = bag.require(":key")
    active = bag.consume(":active", False)
    if not isinstance(active, bool):
        active = False
    kind = ElementKind(
        "div",
        {
            "id": f"pane-{key}",
            "class": combine_classes("tab-pane fade", "show active" if active else None),
            "role": "tabpanel",
            "aria-labelledby": f"tab-{key}",
            "tabindex": "0",
        },
    )
    return kind.build(bag.remaining(), content)
