#! /usr/bin/env python
"""Property change notification for tag objects

Every tag class in :mod:`tagkit.html` is a :class:`Bean`: it keeps a
list of listeners that are told when one of its properties changes and
a second list of listeners that may veto a change before it happens.
Listeners are plain callables that take a single
:class:`PropertyChangeEvent` argument."""

import logging

from .errors import InvalidArgument, PropertyVetoError, require


class PropertyChangeEvent(object):

    """Describes a change to a named property

    source
        The object whose property is changing

    name
        The name of the property

    old_value, new_value
        The value before and after the change."""

    def __init__(self, source, name, old_value, new_value):
        self.source = source
        self.name = name
        self.old_value = old_value
        self.new_value = new_value

    def __repr__(self):
        return "PropertyChangeEvent(%r, %r, %r, %r)" % (
            self.source, self.name, self.old_value, self.new_value)


class PropertyChangeSupport(object):

    """Maintains a list of property change listeners

    source
        The object that events are fired on behalf of."""

    def __init__(self, source):
        self.source = source
        self.listeners = []

    def add_listener(self, listener):
        require(listener, "listener")
        self.listeners.append(listener)

    def remove_listener(self, listener):
        """Removes *listener*

        Removing a listener that was never added has no effect."""
        require(listener, "listener")
        try:
            self.listeners.remove(listener)
        except ValueError:
            pass

    def fire(self, name, old_value, new_value):
        """Notifies all listeners of a change

        No event is fired if *old_value* and *new_value* are equal
        (and not None).  Returns the event that was fired or None."""
        if old_value is not None and old_value == new_value:
            return None
        event = PropertyChangeEvent(self.source, name, old_value, new_value)
        for listener in list(self.listeners):
            listener(event)
        return event


class VetoableChangeSupport(PropertyChangeSupport):

    """Maintains a list of vetoable change listeners

    A listener rejects a change by raising
    :class:`tagkit.errors.PropertyVetoError`, the error propagates to
    the caller of :meth:`fire` and the change must not be made."""

    def fire(self, name, old_value, new_value):
        try:
            return super(VetoableChangeSupport, self).fire(
                name, old_value, new_value)
        except PropertyVetoError as err:
            logging.debug("Change to %s vetoed: %s", name, str(err))
            raise


class Bean(object):

    """A mix-in class for objects with observable properties

    Properties are stored as ordinary instance attributes, the name of
    the attribute is the property name with a leading underscore."""

    def __init__(self):
        self.changes = PropertyChangeSupport(self)
        self.vetos = VetoableChangeSupport(self)

    def add_property_change_listener(self, listener):
        self.changes.add_listener(listener)

    def remove_property_change_listener(self, listener):
        self.changes.remove_listener(listener)

    def add_vetoable_change_listener(self, listener):
        self.vetos.add_listener(listener)

    def remove_vetoable_change_listener(self, listener):
        self.vetos.remove_listener(listener)

    def set_property(self, name, value):
        """Sets property *name* to *value*

        The vetoable change listeners are consulted first; if none of
        them raise :class:`tagkit.errors.PropertyVetoError` the value is
        set and the property change listeners are notified."""
        attr_name = "_" + name
        old_value = getattr(self, attr_name, None)
        self.vetos.fire(name, old_value, value)
        setattr(self, attr_name, value)
        self.changes.fire(name, old_value, value)

    def get_property(self, name):
        return getattr(self, "_" + name, None)


def check_range(value, arg_name, min_value=None, max_value=None):
    """Returns *value* if it is in range, otherwise raises
    :class:`tagkit.errors.InvalidArgument`"""
    require(value, arg_name)
    if ((min_value is not None and value < min_value) or
            (max_value is not None and value > max_value)):
        raise InvalidArgument(arg_name, value)
    return value


def bean_property(name, check=None, doc=None):
    """Returns a property that fires change events when set

    name
        The name of the property, the value is stored in the attribute
        '_' + name.

    check
        An optional function called with the new value before any
        listeners are consulted.  It returns the (possibly converted)
        value to set or raises :class:`tagkit.errors.InvalidArgument`.
        If no check is given None values are rejected."""

    def fget(self):
        return self.get_property(name)

    def fset(self, value):
        if check is None:
            value = require(value, name)
        else:
            value = check(value)
        self.set_property(name, value)

    return property(fget, fset, doc=doc)
