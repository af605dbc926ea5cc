#! /usr/bin/env python
"""Classes that generate HTML and XSL-FO tags

Each class represents a single element (or a small group of elements)
and generates its markup from a handful of properties.  Properties are
ordinary python attributes but setting one validates the new value and
notifies any listeners registered with the object, see
:mod:`tagkit.beans`.  For example::

    h = HTMLHeading(1, "Contents", Align.center)
    h.direction = Direction.rtl
    str(h)
    # '<h1 align="center" dir="rtl">Contents</h1>'

Attribute values are escaped with :func:`tagkit.transform.encode`,
element content is written as given so that it may contain further
markup."""

import logging

from .beans import Bean, bean_property, check_range
from .errors import IncompleteTagError, InvalidArgument, require
from .tagtypes import (
    Align,
    Checked,
    Compact,
    Direction,
    InputType,
    Method,
    Multiple,
    NoWrap,
    OrderedListType,
    Selected,
    UnorderedListType,
    VAlign,
    WRITING_MODE)
from .transform import encode


HEADING_FO_SIZES = {
    1: '25pt',
    2: '20pt',
    3: '15pt',
    4: '13pt',
    5: '11pt',
    6: '9pt'
}
"""Font sizes used for headings in XSL-FO output"""

TEXT_FO_SIZES = {
    1: '8pt',
    2: '10pt',
    3: '12pt',
    4: '14pt',
    5: '18pt',
    6: '24pt',
    7: '36pt'
}
"""Font sizes used for HTML font sizes 1-7 in XSL-FO output"""

BULLETS = {
    UnorderedListType.disc: '•',
    UnorderedListType.square: '▪',
    UnorderedListType.circle: '◦'
}
"""Labels used for unordered list items in XSL-FO output"""


def _enum_check(enum_cls, name):
    def check(value):
        return enum_cls.check(require(value, name), name)
    return check


def _range_check(name, min_value=None, max_value=None):
    def check(value):
        return check_range(value, name, min_value, max_value)
    return check


def attr(name, value):
    """Returns ' name="value"' with value escaped

    An empty string is returned if value is None or empty."""
    if value is None or value == '':
        return ''
    return ' %s="%s"' % (name, encode(str(value)))


def fo_attr(name, value):
    """Returns " name='value'" as used in XSL-FO output

    The value is escaped with :func:`tagkit.transform.encode` and any
    apostrophe is written as &apos;"""
    if value is None or value == '':
        return ''
    return " %s='%s'" % (name, encode(str(value)).replace("'", "&apos;"))


def get_length(value, percent=False):
    """Returns a length attribute value, e.g., '50' or '50%'

    None is returned if value is 0 (not set)."""
    if not value:
        return None
    return "%i%s" % (value, '%' if percent else '')


def get_content(element, fo=False):
    """Returns the markup for *element*

    element
        A string (written as-is) or a :class:`TagElement`.

    fo
        If True the XSL-FO representation is returned."""
    if isinstance(element, TagElement):
        if fo:
            return element.get_fo_tag()
        return element.get_tag()
    return element


class TagElement(Bean):

    """Abstract class for all tag elements

    All elements support the language and direction properties, when
    set they are written as the lang and dir attributes of the
    element's start tag."""

    def __init__(self):
        super(TagElement, self).__init__()
        self._language = None
        self._direction = None

    language = bean_property("language", doc="The lang attribute")
    direction = bean_property(
        "direction", _enum_check(Direction, "direction"),
        doc="The dir attribute, one of the :class:`Direction` constants")

    def get_language_attr(self):
        return attr('lang', self._language)

    def get_direction_attr(self):
        return attr('dir', Direction.to_str(self._direction)
                    if self._direction is not None else None)

    def get_writing_mode(self):
        """The XSL-FO writing-mode for this element's direction"""
        return WRITING_MODE[
            Direction.DEFAULT if self._direction is None else
            self._direction]

    def get_tag(self):
        """Returns the HTML markup for this element"""
        raise NotImplementedError

    def get_fo_tag(self):
        """Returns the XSL-FO markup for this element

        Not all elements support XSL-FO output, by default
        NotImplementedError is raised."""
        raise NotImplementedError

    def __str__(self):
        return self.get_tag()


#
#   Text and Hyperlinks
#   -------------------


class HTMLText(TagElement):

    """Represents a run of text with font and style attributes

    text
        The text, may contain markup."""

    def __init__(self, text=None):
        super(HTMLText, self).__init__()
        self._text = None
        self._alignment = None
        self._bold = False
        self._italic = False
        self._underscore = False
        self._fixed = False
        self._size = 0
        self._color = None
        if text is not None:
            self.text = text

    text = bean_property("text")
    alignment = bean_property("alignment", _enum_check(Align, "alignment"))
    bold = bean_property("bold", bool)
    italic = bean_property("italic", bool)
    underscore = bean_property("underscore", bool)
    fixed = bean_property("fixed", bool)
    size = bean_property("size", _range_check("size", 0, 7),
                         doc="Font size 1-7 or 0 if not set")
    color = bean_property("color", doc="Font color, e.g., '#FF0000'")

    def get_start_style_tag(self):
        tags = []
        if self._bold:
            tags.append("<b>")
        if self._italic:
            tags.append("<i>")
        if self._underscore:
            tags.append("<u>")
        if self._fixed:
            tags.append("<tt>")
        return ''.join(tags)

    def get_end_style_tag(self):
        tags = []
        if self._fixed:
            tags.append("</tt>")
        if self._underscore:
            tags.append("</u>")
        if self._italic:
            tags.append("</i>")
        if self._bold:
            tags.append("</b>")
        return ''.join(tags)

    def has_font(self):
        return self._size > 0 or self._color is not None

    def get_tag(self, text=None, use_alignment=True):
        """Returns the text tag

        text
            Optional text to use in place of the text property, the
            text property itself is unchanged.

        use_alignment
            False to suppress the <div> used for alignment."""
        if text is None:
            text = self._text
        if text is None:
            raise IncompleteTagError("HTMLText", "text")
        logging.debug("Generating HTMLText tag")
        tag = []
        use_alignment = use_alignment and (
            self._alignment is not None or self._language is not None or
            self._direction is not None)
        if use_alignment:
            tag.append('<div%s%s%s>' % (
                attr('align', Align.to_str(self._alignment)
                     if self._alignment is not None else None),
                self.get_language_attr(), self.get_direction_attr()))
        if self.has_font():
            tag.append('<font%s%s>' % (
                attr('size', self._size or None), attr('color', self._color)))
        tag.append(self.get_start_style_tag())
        tag.append(get_content(text))
        tag.append(self.get_end_style_tag())
        if self.has_font():
            tag.append('</font>')
        if use_alignment:
            tag.append('</div>')
        return ''.join(tag)

    def get_fo_tag(self, text=None):
        if text is None:
            text = self._text
        if text is None:
            raise IncompleteTagError("HTMLText", "text")
        tag = ['<fo:inline']
        if self._bold:
            tag.append(fo_attr('font-weight', 'bold'))
        if self._italic:
            tag.append(fo_attr('font-style', 'italic'))
        if self._underscore:
            tag.append(fo_attr('text-decoration', 'underline'))
        if self._fixed:
            tag.append(fo_attr('font-family', 'monospace'))
        if self._size:
            tag.append(fo_attr('font-size', TEXT_FO_SIZES[self._size]))
        tag.append(fo_attr('color', self._color))
        tag.append('>')
        tag.append(get_content(text, True))
        tag.append('</fo:inline>')
        if self._alignment is not None:
            tag.insert(0, "<fo:block%s>" % fo_attr(
                'text-align', Align.to_str(self._alignment)))
            tag.append('</fo:block>')
        return ''.join(tag)


class HTMLHyperlink(TagElement):

    """Represents a hyperlink

    link
        The URL of the resource being linked to.

    text
        The text of the link, may contain markup (e.g., an <img> tag).

    target
        The optional target frame.

    The URL written to the href attribute is made up of the link, the
    properties (as a query string) and the location (as a fragment).
    Property values are written as given, no %-encoding is applied."""

    def __init__(self, link=None, text=None, target=None):
        super(HTMLHyperlink, self).__init__()
        self._link = None
        self._text = None
        self._target = None
        self._name = None
        self._title = None
        self._location = None
        self._properties = None
        if link is not None:
            self.link = link
        if text is not None:
            self.text = text
        if target is not None:
            self.target = target

    link = bean_property("link")
    text = bean_property("text")
    target = bean_property("target")
    name = bean_property("name", doc="The name of the anchor")
    title = bean_property("title")
    location = bean_property(
        "location", doc="The bookmark (fragment) within the resource")
    properties = bean_property(
        "properties", doc="A dictionary of query parameters")

    def get_url(self):
        """Returns the URL that the link points to (unescaped)"""
        if self._link is None:
            raise IncompleteTagError("HTMLHyperlink", "link")
        url = [self._link]
        if self._properties:
            url.append('?')
            url.append('&'.join("%s=%s" % (k, v) for k, v in
                                self._properties.items()))
        if self._location is not None:
            url.append('#')
            url.append(self._location)
        return ''.join(url)

    def get_tag(self, text=None):
        """Returns the hyperlink tag

        text
            Optional text to use in place of the text property."""
        if text is None:
            text = self._text
        if text is None:
            raise IncompleteTagError("HTMLHyperlink", "text")
        logging.debug("Generating HTMLHyperlink tag")
        return '<a%s%s%s%s%s%s>%s</a>' % (
            attr('href', self.get_url()), attr('name', self._name),
            attr('title', self._title), attr('target', self._target),
            self.get_language_attr(), self.get_direction_attr(),
            get_content(text))

    def get_fo_tag(self, text=None):
        if text is None:
            text = self._text
        if text is None:
            raise IncompleteTagError("HTMLHyperlink", "text")
        return "<fo:basic-link%s>%s</fo:basic-link>" % (
            fo_attr('external-destination', self.get_url()),
            get_content(text, True))


class HTMLHeading(TagElement):

    """Represents a heading, <h1> to <h6>

    level
        The heading level, 1-6

    text
        The text of the heading, may contain markup

    align
        Optional alignment, one of the :class:`Align` constants."""

    def __init__(self, level=1, text=None, align=None):
        super(HTMLHeading, self).__init__()
        self._level = 1
        self._text = None
        self._align = None
        self.level = level
        if text is not None:
            self.text = text
        if align is not None:
            self.align = align

    level = bean_property("level", _range_check("level", 1, 6))
    text = bean_property("text")
    align = bean_property("align", _enum_check(Align, "align"))

    def get_tag(self):
        if self._text is None:
            raise IncompleteTagError("HTMLHeading", "text")
        logging.debug("Generating HTMLHeading tag")
        return '<h%i%s%s%s>%s</h%i>' % (
            self._level,
            attr('align', Align.to_str(self._align)
                 if self._align is not None else None),
            self.get_language_attr(), self.get_direction_attr(),
            get_content(self._text), self._level)

    def get_fo_tag(self):
        if self._text is None:
            raise IncompleteTagError("HTMLHeading", "text")
        return ("<fo:block-container%s>\n<fo:block%s%s>%s</fo:block>\n"
                "</fo:block-container>\n") % (
            fo_attr('writing-mode', self.get_writing_mode()),
            fo_attr('font-size', HEADING_FO_SIZES[self._level]),
            fo_attr('text-align', Align.to_str(self._align)
                    if self._align is not None else None),
            get_content(self._text, True))


#
#   Form Inputs
#   -----------


class FormInput(TagElement):

    """Abstract class for <input> elements

    name
        The name of the input

    value
        The initial value of the input

    Derived classes set the class attribute input_type to one of the
    :class:`InputType` constants.  If name_required is True (the
    default) the name must be set before the tag is generated."""

    input_type = None
    name_required = True

    def __init__(self, name=None, value=None):
        super(FormInput, self).__init__()
        self._name = None
        self._value = None
        self._size = 0
        if name is not None:
            self.name = name
        if value is not None:
            self.value = value

    name = bean_property("name")
    value = bean_property("value")
    size = bean_property("size", _range_check("size", 0),
                         doc="The display width, 0 if not set")

    def get_attributes(self):
        """Returns the type specific attributes of the input"""
        return ''

    def get_tag(self):
        if self.name_required and self._name is None:
            raise IncompleteTagError(self.__class__.__name__, "name")
        logging.debug("Generating %s tag", self.__class__.__name__)
        return '<input%s%s%s%s%s%s%s />' % (
            attr('type', InputType.to_str(self.input_type)),
            attr('name', self._name), attr('value', self._value),
            attr('size', self._size or None), self.get_attributes(),
            self.get_language_attr(), self.get_direction_attr())


class TextFormInput(FormInput):

    input_type = InputType.text

    def __init__(self, name=None, value=None):
        self._max_length = 0
        super(TextFormInput, self).__init__(name, value)

    max_length = bean_property(
        "max_length", _range_check("max_length", 0),
        doc="The maximum number of characters, 0 if not set")

    def get_attributes(self):
        return attr('maxlength', self._max_length or None)


class PasswordFormInput(TextFormInput):
    input_type = InputType.password


class HiddenFormInput(FormInput):

    input_type = InputType.hidden

    def get_tag(self):
        # hidden inputs carry no presentation attributes
        if self._name is None:
            raise IncompleteTagError("HiddenFormInput", "name")
        return '<input%s%s%s />' % (
            attr('type', InputType.to_str(self.input_type)),
            attr('name', self._name), attr('value', self._value))


class ButtonFormInput(FormInput):

    """A push button that runs a script when pressed

    action
        The script to run, written to the onclick attribute."""

    input_type = InputType.button
    name_required = False

    def __init__(self, name=None, value=None, action=None):
        self._action = None
        super(ButtonFormInput, self).__init__(name, value)
        if action is not None:
            self.action = action

    action = bean_property("action")

    def get_attributes(self):
        return attr('onclick', self._action)


class SubmitFormInput(FormInput):
    input_type = InputType.submit
    name_required = False


class ResetFormInput(FormInput):
    input_type = InputType.reset
    name_required = False


class ToggleFormInput(FormInput):

    """Abstract class for inputs that are checked or unchecked

    label
        Optional text written after the input.

    checked
        True if the input is initially selected."""

    def __init__(self, name=None, value=None, label=None, checked=False):
        self._label = None
        self._checked = False
        super(ToggleFormInput, self).__init__(name, value)
        if label is not None:
            self.label = label
        self.checked = checked

    label = bean_property("label")
    checked = bean_property("checked", bool)

    def get_attributes(self):
        return Checked.attr(self._checked)

    def get_tag(self):
        tag = super(ToggleFormInput, self).get_tag()
        if self._label is not None:
            tag = "%s %s" % (tag, get_content(self._label))
        return tag


class CheckboxFormInput(ToggleFormInput):
    input_type = InputType.checkbox


class RadioFormInput(ToggleFormInput):
    input_type = InputType.radio


class SelectOption(TagElement):

    """An <option> within a :class:`SelectFormElement`

    text
        The text displayed for the option

    value
        The value submitted when the option is selected

    selected
        True if the option is initially selected"""

    def __init__(self, text=None, value=None, selected=False):
        super(SelectOption, self).__init__()
        self._text = None
        self._value = None
        self._selected = False
        if text is not None:
            self.text = text
        if value is not None:
            self.value = value
        self.selected = selected

    text = bean_property("text")
    value = bean_property("value")
    selected = bean_property("selected", bool)

    def get_tag(self):
        if self._text is None:
            raise IncompleteTagError("SelectOption", "text")
        return "<option%s%s%s%s>%s</option>" % (
            attr('value', self._value), Selected.attr(self._selected),
            self.get_language_attr(), self.get_direction_attr(),
            get_content(self._text))


class SelectFormElement(TagElement):

    """Represents <select>, a list of options

    name
        The name of the element, required before the tag is generated

    Unless multiple is True at most one option may be selected; adding
    a second selected option raises :class:`InvalidArgument`."""

    def __init__(self, name=None):
        super(SelectFormElement, self).__init__()
        self.options = []
        self._name = None
        self._size = 0
        self._multiple = False
        if name is not None:
            self.name = name

    name = bean_property("name")
    size = bean_property("size", _range_check("size", 0),
                         doc="The number of visible rows, 0 if not set")
    multiple = bean_property("multiple", bool)

    def option_count(self):
        return len(self.options)

    def get_selected(self):
        """Returns the list of selected options"""
        return [option for option in self.options if option.selected]

    def add_option(self, option, value=None, selected=False):
        """Adds an option to the list

        option
            A :class:`SelectOption` or the text of a new option, in
            which case *value* and *selected* are used to create it.

        Returns the option added."""
        require(option, "option")
        if not isinstance(option, SelectOption):
            option = SelectOption(option, require(value, "value"), selected)
        if option.selected and not self._multiple and self.get_selected():
            raise InvalidArgument("selected", True)
        self.options.append(option)
        self.changes.fire("options", None, option)
        return option

    def remove_option(self, option):
        """Removes *option*

        Removing an option that is not in the list has no effect."""
        require(option, "option")
        if option in self.options:
            self.options.remove(option)
            self.changes.fire("options", option, None)

    def get_tag(self):
        if self._name is None:
            raise IncompleteTagError("SelectFormElement", "name")
        logging.debug("Generating SelectFormElement tag")
        tag = ["<select%s%s%s%s%s>\n" % (
            attr('name', self._name), attr('size', self._size or None),
            Multiple.attr(self._multiple), self.get_language_attr(),
            self.get_direction_attr())]
        for option in self.options:
            tag.append(option.get_tag())
            tag.append("\n")
        tag.append("</select>")
        return ''.join(tag)


class HTMLForm(TagElement):

    """Represents <form>

    url
        The URL of the form's action, required before the tag is
        generated.

    The elements of the form are written in the order they were added,
    each followed by a new line.  Elements may be strings (written
    as-is) or any :class:`TagElement`.  The hidden parameters are a
    dictionary of names and values written as
    :class:`HiddenFormInput` elements before the other elements."""

    def __init__(self, url=None):
        super(HTMLForm, self).__init__()
        self.elements = []
        self._url = None
        self._method = Method.DEFAULT
        self._target = None
        self._hidden_parameters = None
        if url is not None:
            self.url = url

    url = bean_property("url", doc="The action URL")
    method = bean_property(
        "method", _enum_check(Method, "method"),
        doc="One of the :class:`Method` constants, defaults to get")
    target = bean_property("target", doc="The target frame of the response")
    hidden_parameters = bean_property(
        "hidden_parameters",
        lambda p: dict(require(p, "hidden_parameters")))

    def add_element(self, element):
        require(element, "element")
        self.elements.append(element)
        self.changes.fire("elements", None, element)
        return element

    def remove_element(self, element):
        """Removes *element*

        Removing an element that is not in the form has no effect."""
        require(element, "element")
        if element in self.elements:
            self.elements.remove(element)
            self.changes.fire("elements", element, None)

    def get_tag(self):
        if self._url is None:
            raise IncompleteTagError("HTMLForm", "url")
        logging.debug("Generating HTMLForm tag with %i elements",
                      len(self.elements))
        tag = ["<form%s%s%s%s%s>\n" % (
            attr('action', self._url), attr('method', Method.to_str(
                self._method)), attr('target', self._target),
            self.get_language_attr(), self.get_direction_attr())]
        if self._hidden_parameters:
            for name, value in self._hidden_parameters.items():
                tag.append(HiddenFormInput(name, value).get_tag())
                tag.append("\n")
        for element in self.elements:
            tag.append(get_content(element))
            tag.append("\n")
        tag.append("</form>")
        return ''.join(tag)

    def get_fo_tag(self):
        """Returns the XSL-FO markup for the form's content

        Input controls have no XSL-FO representation and are omitted,
        other elements (text, headings, lists, etc.) are written in
        order."""
        tag = ["<fo:block-container%s>\n" % fo_attr(
            'writing-mode', self.get_writing_mode())]
        for element in self.elements:
            if isinstance(element, (FormInput, SelectFormElement)):
                continue
            tag.append(get_content(element, True))
        tag.append("</fo:block-container>\n")
        return ''.join(tag)


#
#   Lists
#   -----


def roman_numeral(n):
    """Returns the upper-case roman numeral representation of n"""
    result = []
    for value, numeral in (
            (1000, 'M'), (900, 'CM'), (500, 'D'), (400, 'CD'),
            (100, 'C'), (90, 'XC'), (50, 'L'), (40, 'XL'),
            (10, 'X'), (9, 'IX'), (5, 'V'), (4, 'IV'), (1, 'I')):
        while n >= value:
            result.append(numeral)
            n -= value
    return ''.join(result)


def letter_label(n):
    """Returns 'A'...'Z', 'AA'... for n = 1, 2, ..."""
    result = []
    while n > 0:
        n, r = divmod(n - 1, 26)
        result.append(chr(0x41 + r))
    return ''.join(reversed(result))


class ListItem(TagElement):

    """An item in a list

    data
        The content of the item, a string or a :class:`TagElement`
        such as a nested list."""

    def __init__(self, data=None):
        super(ListItem, self).__init__()
        self._data = None
        if data is not None:
            self.data = data

    data = bean_property("data")

    def get_tag(self):
        if self._data is None:
            raise IncompleteTagError("ListItem", "data")
        return "<li%s%s>%s</li>\n" % (
            self.get_language_attr(), self.get_direction_attr(),
            get_content(self._data))

    def get_fo_tag(self, label=''):
        if self._data is None:
            raise IncompleteTagError("ListItem", "data")
        return ("<fo:list-item>\n"
                "<fo:list-item-label><fo:block>%s</fo:block>"
                "</fo:list-item-label>\n"
                "<fo:list-item-body><fo:block>%s</fo:block>"
                "</fo:list-item-body>\n"
                "</fo:list-item>\n") % (label, get_content(self._data, True))


class HTMLList(TagElement):

    """Abstract class for ordered and unordered lists

    items
        An optional iterable of items.  Strings are converted to
        :class:`ListItem` instances."""

    list_tag = None

    def __init__(self, items=None):
        super(HTMLList, self).__init__()
        self.items = []
        self._compact = False
        if items is not None:
            for item in items:
                self.add_item(item)

    compact = bean_property("compact", bool)

    def add_item(self, item):
        require(item, "item")
        if not isinstance(item, ListItem):
            item = ListItem(item)
        self.items.append(item)
        self.changes.fire("items", None, item)
        return item

    def remove_item(self, item):
        require(item, "item")
        self.items.remove(item)
        self.changes.fire("items", item, None)

    def get_attributes(self):
        return ''

    def get_label(self, index):
        raise NotImplementedError

    def get_tag(self):
        if not self.items:
            raise IncompleteTagError(self.__class__.__name__, "items")
        logging.debug("Generating %s tag", self.__class__.__name__)
        tag = ["<%s%s%s%s%s>\n" % (
            self.list_tag, self.get_attributes(), Compact.attr(self._compact),
            self.get_language_attr(), self.get_direction_attr())]
        for item in self.items:
            tag.append(item.get_tag())
        tag.append("</%s>\n" % self.list_tag)
        return ''.join(tag)

    def get_fo_tag(self):
        if not self.items:
            raise IncompleteTagError(self.__class__.__name__, "items")
        tag = ["<fo:list-block%s>\n" % fo_attr(
            'writing-mode', self.get_writing_mode())]
        i = 0
        for item in self.items:
            # nested lists are not labelled
            if isinstance(item.data, HTMLList):
                tag.append(item.get_fo_tag())
            else:
                tag.append(item.get_fo_tag(self.get_label(i)))
                i += 1
        tag.append("</fo:list-block>\n")
        return ''.join(tag)


class OrderedList(HTMLList):

    """Represents <ol>

    list_type
        One of the :class:`OrderedListType` constants

    start
        The number of the first item (default 1)"""

    list_tag = "ol"

    def __init__(self, items=None, list_type=None):
        super(OrderedList, self).__init__(items)
        self._list_type = None
        self._start = 1
        if list_type is not None:
            self.list_type = list_type

    list_type = bean_property(
        "list_type", _enum_check(OrderedListType, "list_type"))
    start = bean_property("start", _range_check("start", 1))

    def get_attributes(self):
        return "%s%s" % (
            attr('type', OrderedListType.to_str(self._list_type)
                 if self._list_type is not None else None),
            attr('start', self._start if self._start != 1 else None))

    def get_label(self, index):
        n = self._start + index
        list_type = self._list_type
        if list_type is None:
            list_type = OrderedListType.DEFAULT
        if list_type == OrderedListType.CAPITALS:
            label = letter_label(n)
        elif list_type == OrderedListType.SMALL_LETTERS:
            label = letter_label(n).lower()
        elif list_type == OrderedListType.LARGE_ROMAN:
            label = roman_numeral(n)
        elif list_type == OrderedListType.SMALL_ROMAN:
            label = roman_numeral(n).lower()
        else:
            label = str(n)
        return label + "."


class UnorderedList(HTMLList):

    """Represents <ul>

    list_type
        One of the :class:`UnorderedListType` constants"""

    list_tag = "ul"

    def __init__(self, items=None, list_type=None):
        super(UnorderedList, self).__init__(items)
        self._list_type = None
        if list_type is not None:
            self.list_type = list_type

    list_type = bean_property(
        "list_type", _enum_check(UnorderedListType, "list_type"))

    def get_attributes(self):
        return attr('type', UnorderedListType.to_str(self._list_type)
                    if self._list_type is not None else None)

    def get_label(self, index):
        list_type = self._list_type
        if list_type is None:
            list_type = UnorderedListType.DEFAULT
        return BULLETS[list_type]


#
#   Tables
#   ------


class HTMLTableCell(TagElement):

    """Represents a table cell, <td> or <th>

    element
        The content of the cell, a string or a :class:`TagElement`."""

    def __init__(self, element=None):
        super(HTMLTableCell, self).__init__()
        self._element = None
        self._align = None
        self._valign = None
        self._col_span = 1
        self._row_span = 1
        self._height = 0
        self._height_percent = False
        self._width = 0
        self._width_percent = False
        self._nowrap = False
        self._header = False
        if element is not None:
            self.element = element

    element = bean_property("element")
    align = bean_property("align", _enum_check(Align, "align"))
    valign = bean_property("valign", _enum_check(VAlign, "valign"))
    col_span = bean_property("col_span", _range_check("col_span", 1))
    row_span = bean_property("row_span", _range_check("row_span", 1))
    height = bean_property("height", _range_check("height", 0))
    height_percent = bean_property("height_percent", bool)
    width = bean_property("width", _range_check("width", 0))
    width_percent = bean_property("width_percent", bool)
    nowrap = bean_property("nowrap", bool)
    header = bean_property("header", bool,
                           doc="True if the cell is a header, <th>")

    def get_attributes(self):
        return ''.join((
            attr('align', Align.to_str(self._align)
                 if self._align is not None else None),
            attr('valign', VAlign.to_str(self._valign)
                 if self._valign is not None else None),
            attr('rowspan', self._row_span if self._row_span > 1 else None),
            attr('colspan', self._col_span if self._col_span > 1 else None),
            attr('height', get_length(self._height, self._height_percent)),
            attr('width', get_length(self._width, self._width_percent)),
            NoWrap.attr(self._nowrap),
            self.get_language_attr(),
            self.get_direction_attr()))

    def get_tag(self, element=None):
        """Returns the cell tag

        element
            Optional content to use in place of the element property."""
        if element is None:
            element = self._element
        if element is None:
            raise IncompleteTagError("HTMLTableCell", "element")
        name = "th" if self._header else "td"
        return "<%s%s>%s</%s>\n" % (
            name, self.get_attributes(), get_content(element), name)


class HTMLTableRow(TagElement):

    """Represents a table row

    cells
        An optional iterable of cells.  Values that are not
        :class:`HTMLTableCell` instances are wrapped in a new cell."""

    def __init__(self, cells=None):
        super(HTMLTableRow, self).__init__()
        self.cells = []
        self._align = None
        self._valign = None
        if cells is not None:
            for cell in cells:
                self.add_cell(cell)

    align = bean_property("align", _enum_check(Align, "align"))
    valign = bean_property("valign", _enum_check(VAlign, "valign"))

    def add_cell(self, cell):
        require(cell, "cell")
        if not isinstance(cell, HTMLTableCell):
            cell = HTMLTableCell(cell)
        self.cells.append(cell)
        self.changes.fire("cells", None, cell)
        return cell

    def get_tag(self):
        if not self.cells:
            raise IncompleteTagError("HTMLTableRow", "cells")
        tag = ["<tr%s%s%s%s>\n" % (
            attr('align', Align.to_str(self._align)
                 if self._align is not None else None),
            attr('valign', VAlign.to_str(self._valign)
                 if self._valign is not None else None),
            self.get_language_attr(), self.get_direction_attr())]
        for cell in self.cells:
            tag.append(cell.get_tag())
        tag.append("</tr>\n")
        return ''.join(tag)


def _check_header(header):
    require(header, "header")
    # a single string would otherwise be split into characters
    if isinstance(header, str):
        raise InvalidArgument("header", header)
    return [get_content(x) for x in header]


def _check_table_align(value):
    value = Align.check(require(value, "alignment"), "alignment")
    if value == Align.justify:
        raise InvalidArgument("alignment", value)
    return value


class HTMLTable(TagElement):

    """Represents a table

    rows
        An optional iterable of :class:`HTMLTableRow` instances or
        iterables of cell values.

    The optional header is a list of column headings written as a row of
    <th> cells before the data rows.  The header is only written while
    header_in_use is True (the default), in which case it must have one
    heading for each cell of the first row."""

    def __init__(self, rows=None):
        super(HTMLTable, self).__init__()
        self.rows = []
        self._alignment = None
        self._caption = None
        self._header = None
        self._header_in_use = True
        self._border = 0
        self._cell_padding = None
        self._cell_spacing = None
        self._width = 0
        self._width_percent = False
        if rows is not None:
            for row in rows:
                self.add_row(row)

    alignment = bean_property(
        "alignment", _check_table_align,
        doc="Horizontal alignment of the table: left, center or right")
    caption = bean_property("caption")
    header = bean_property("header", _check_header)
    header_in_use = bean_property("header_in_use", bool)
    border = bean_property("border", _range_check("border", 0))
    cell_padding = bean_property("cell_padding",
                                 _range_check("cell_padding", 0))
    cell_spacing = bean_property("cell_spacing",
                                 _range_check("cell_spacing", 0))
    width = bean_property("width", _range_check("width", 0))
    width_percent = bean_property("width_percent", bool)

    def add_row(self, row):
        require(row, "row")
        if not isinstance(row, HTMLTableRow):
            row = HTMLTableRow(row)
        self.rows.append(row)
        self.changes.fire("rows", None, row)
        return row

    def row_count(self):
        return len(self.rows)

    def get_row(self, index):
        """Returns the row at *index* (0-based)

        Raises :class:`InvalidArgument` if index is out of range."""
        if index < 0 or index >= len(self.rows):
            raise InvalidArgument("index", index)
        return self.rows[index]

    def remove_row(self, row):
        """Removes a row

        row
            An :class:`HTMLTableRow` or the integer index of the row to
            remove.  An index out of range raises
            :class:`InvalidArgument`, removing a row that is not in the
            table has no effect."""
        require(row, "row")
        if isinstance(row, int):
            row = self.get_row(row)
        elif row not in self.rows:
            return
        self.rows.remove(row)
        self.changes.fire("rows", row, None)

    def remove_all_rows(self):
        old_rows = self.rows
        self.rows = []
        self.changes.fire("rows", old_rows, None)

    def get_tag(self):
        if not self.rows and not self._header:
            raise IncompleteTagError("HTMLTable", "rows")
        use_header = self._header_in_use and self._header
        if use_header and self.rows and (
                len(self._header) != len(self.rows[0].cells)):
            raise InvalidArgument("header", len(self._header))
        logging.debug("Generating HTMLTable tag with %i rows", len(self.rows))
        tag = ["<table%s%s%s%s%s%s%s>\n" % (
            attr('align', Align.to_str(self._alignment)
                 if self._alignment is not None else None),
            attr('border', self._border or None),
            attr('cellpadding', self._cell_padding),
            attr('cellspacing', self._cell_spacing),
            attr('width', get_length(self._width, self._width_percent)),
            self.get_language_attr(), self.get_direction_attr())]
        if self._caption is not None:
            tag.append("<caption>%s</caption>\n" %
                       get_content(self._caption))
        if use_header:
            tag.append("<tr>\n")
            for heading in self._header:
                tag.append("<th>%s</th>\n" % heading)
            tag.append("</tr>\n")
        for row in self.rows:
            tag.append(row.get_tag())
        tag.append("</table>\n")
        return ''.join(tag)
