#! /usr/bin/env python
"""Attribute value types used by the tag classes"""

import logging

from .errors import InvalidArgument


class EnumMetaClass(type):

    """Metaclass for :class:`Enumeration`

    Initialises the Enumeration immediately after the class is
    defined."""

    def __init__(self, name, bases, dct):
        super(EnumMetaClass, self).__init__(name, bases, dct)
        self._init_enum()


class Enumeration(object, metaclass=EnumMetaClass):

    """Abstract class for defining enumerations

    The class is not designed to be instantiated but to act as a method
    of defining constants to represent the values of an enumeration and
    for converting between those constants and the string values used
    in HTML attributes.

    Derived classes define a single class member called 'decode' which
    is a mapping from canonical strings to simple integers.  Once
    defined, the class is populated with a reverse mapping dictionary
    (called encode) and, where the strings are valid python names,
    the strings are added as attributes of the class itself::

        class Direction(Enumeration):
            decode = {
                'ltr': 1,
                'rtl': 2}

        Direction.rtl == 2      # True thanks to metaclass

    A second dictionary called aliases may map additional names onto
    existing canonical strings.  The special key None in the aliases
    dictionary defines the value of the attribute DEFAULT."""

    DEFAULT = None
    """The DEFAULT value of the enumeration defaults to None"""

    @classmethod
    def _init_enum(cls):
        if 'decode' not in cls.__dict__:
            # Skip initialisation for abstract classes
            return
        cls.encode = dict((v, k) for k, v in cls.decode.items())
        for k, v in cls.__dict__.get('aliases', {}).items():
            if k is None:
                cls.DEFAULT = cls.decode[v]
            else:
                cls.decode[k] = cls.decode[v]
        for k, v in cls.decode.items():
            if not k.isidentifier():
                continue
            if hasattr(cls, k):
                logging.error("Illegal name for Enumeration: %s" % repr(k))
            else:
                setattr(cls, k, v)

    @classmethod
    def from_str(cls, src):
        """Decodes a string returning a value in this enumeration.

        If no legal value can be decoded then ValueError is raised."""
        try:
            src = src.strip()
            return cls.decode[src]
        except KeyError:
            raise ValueError("Can't decode %s from %s" % (cls.__name__, src))

    @classmethod
    def from_str_lower(cls, src):
        """Decodes a string, converting it to lower case first."""
        try:
            src = src.strip().lower()
            return cls.decode[src]
        except KeyError:
            raise ValueError("Can't decode %s from %s" % (cls.__name__, src))

    @classmethod
    def to_str(cls, value):
        """Encodes one of the enumeration constants returning a string.

        If value is None then the encoded default value is returned (if
        defined) or None."""
        return cls.encode.get(value, cls.encode.get(cls.DEFAULT, None))

    @classmethod
    def check(cls, value, arg_name):
        """Returns *value* if it is a legal constant

        Raises :class:`tagkit.errors.InvalidArgument` otherwise; the tag
        setters use this method to validate their arguments."""
        if value not in cls.encode:
            raise InvalidArgument(arg_name, value)
        return value


class NamedBoolean(object):

    """An abstract class for named booleans

    Used for SGML-like single-value attributes such as "checked" on
    <input>.  Derived classes define a single class member called
    'name' which is the canonical representation of the name."""

    @classmethod
    def from_str(cls, src):
        """Decodes a string

        Returns True if it matches the name attribute and raises
        ValueError otherwise.  If src is None then False is returned."""
        if src is None:
            return False
        else:
            src = src.strip()
            if src == cls.name:
                return True
            else:
                raise ValueError("Can't decode %s from %s" %
                                 (cls.__name__, src))

    @classmethod
    def to_str(cls, value):
        """Returns either the defined name or None."""
        if value:
            return cls.name
        else:
            return None

    @classmethod
    def attr(cls, value):
        """Returns the attribute as it appears in a start tag

        The result is ' name="name"' if value is True and an empty string
        otherwise."""
        if value:
            return ' %s="%s"' % (cls.name, cls.name)
        else:
            return ""


class Checked(NamedBoolean):
    name = "checked"


class Compact(NamedBoolean):
    name = "compact"


class Multiple(NamedBoolean):

    """For setting the multiple attribute of <select>."""
    name = "multiple"


class NoWrap(NamedBoolean):
    name = "nowrap"


class Selected(NamedBoolean):

    """Used for the selected attribute of <option>."""
    name = "selected"


class Align(Enumeration):

    decode = {
        'left': 1,
        'center': 2,
        'right': 3,
        'justify': 4
    }


class VAlign(Enumeration):

    decode = {
        'top': 1,
        'middle': 2,
        'bottom': 3,
        'baseline': 4
    }


class Direction(Enumeration):

    """Text direction used in the dir attribute

    In XSL-FO the writing-mode 'lr' or 'rl' is used instead, see
    :data:`WRITING_MODE`."""
    decode = {
        'ltr': 1,
        'rtl': 2
    }
    aliases = {
        None: 'ltr'
    }


WRITING_MODE = {
    Direction.ltr: 'lr',
    Direction.rtl: 'rl'
}


class OrderedListType(Enumeration):

    """Numbering styles of <ol>

    The names are not python identifiers so constants are defined
    explicitly."""
    decode = {
        '1': 1,
        'A': 2,
        'a': 3,
        'I': 4,
        'i': 5
    }
    aliases = {
        None: '1'
    }
    NUMBERS = 1
    CAPITALS = 2
    SMALL_LETTERS = 3
    LARGE_ROMAN = 4
    SMALL_ROMAN = 5


class UnorderedListType(Enumeration):

    decode = {
        'disc': 1,
        'square': 2,
        'circle': 3
    }
    aliases = {
        None: 'disc'
    }


class InputType(Enumeration):

    """Enumeration used for the types allowed for <input>"""
    decode = {
        'text': 1,
        'password': 2,
        'checkbox': 3,
        'radio': 4,
        'submit': 5,
        'reset': 6,
        'file': 7,
        'hidden': 8,
        'image': 9,
        'button': 10
    }
    aliases = {
        None: 'text'
    }


class Method(Enumeration):

    """HTTP method used to submit a form

    The lower case names are written to the method attribute; the upper
    case names are aliases.  Method.DEFAULT == Method.get"""
    decode = {
        'get': 1,
        'post': 2
    }
    aliases = {
        None: 'get',
        'GET': 'get',
        'POST': 'post'
    }
