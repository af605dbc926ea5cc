#! /usr/bin/env python
"""Exceptions shared by the tagkit modules"""


class TagError(Exception):

    """Base class for tagkit exceptions"""
    pass


class InvalidArgument(TagError, ValueError):

    """Raised when a required argument is missing or out of range

    Missing (None) arguments are reported with the name of the
    argument as the message, values that are present but illegal are
    reported with the name and the offending value."""

    def __init__(self, arg_name, value=None):
        self.arg_name = arg_name
        self.value = value
        if value is None:
            msg = "%s: argument required" % arg_name
        else:
            msg = "%s: value not valid: %r" % (arg_name, value)
        TagError.__init__(self, msg)


class PropertyVetoError(TagError):

    """Raised by a vetoable-change listener to reject a change

    event
        The :class:`tagkit.beans.PropertyChangeEvent` being vetoed."""

    def __init__(self, msg, event):
        self.event = event
        TagError.__init__(self, msg)


def require(value, arg_name):
    """Returns *value* or raises :class:`InvalidArgument` if it is None"""
    if value is None:
        raise InvalidArgument(arg_name)
    return value


class IncompleteTagError(TagError):

    """Raised when a tag is generated before a required property is set"""

    def __init__(self, tag_name, prop_name):
        self.tag_name = tag_name
        self.prop_name = prop_name
        TagError.__init__(self, "%s: %s must be set before generating tag" %
                          (tag_name, prop_name))
