#! /usr/bin/env python
"""A simple scanner for character strings

The entity decoder and the URL parser are both written as small
scanners over a string of characters; this module provides the
shared machinery."""


class ParserError(ValueError):

    """Exception raised by :class:`BasicParser`

    production
        The name of the production being parsed

    parser
        The :class:`BasicParser` instance raising the error (optional)

    ParserError is a subclass of ValueError."""

    def __init__(self, production, parser=None):
        self.production = production
        if parser:
            #: the position of the parser when the error was raised
            self.pos = parser.pos
            #: up to 40 characters to the left of pos
            self.left = parser.src[max(0, self.pos - 40):self.pos]
            #: up to 40 characters to the right of pos
            self.right = parser.src[self.pos:self.pos + 40]
            if production:
                msg = "ParserError: expected %s at [%i]" % (production,
                                                            self.pos)
            else:
                msg = "ParserError: at [%i]" % self.pos
        else:
            self.pos = None
            self.left = None
            self.right = None
            if production:
                msg = "ParserError: expected %s" % production
            else:
                msg = "ParserError"
        ValueError.__init__(self, msg)


class BasicParser(object):

    r"""A base class for scanning character strings

    source
        The string of characters to scan.

    Methods are named according to the type of operation they perform.

        match\_*
            Returns True or False depending on whether or not the
            production is found at the current location.  The state of
            the parser is unchanged.

        parse\_*
            Attempts to parse the production, returning the parsed text
            or None if it is not present.  The position of the parser
            only changes if the text was parsed.

        require\_*
            Parses the production or raises :class:`ParserError`."""

    def __init__(self, source):
        self.src = source       #: the string being parsed
        self.pos = -1           #: the position of the current character
        self.the_char = None
        """The current character or None if the parser is positioned
        outside the src string."""
        self.next_char()

    def setpos(self, new_pos):
        """Sets the position of the parser to *new_pos*"""
        self.pos = new_pos - 1
        self.next_char()

    def next_char(self):
        """Points the parser at the next character."""
        self.pos += 1
        if self.pos >= 0 and self.pos < len(self.src):
            self.the_char = self.src[self.pos]
        else:
            self.the_char = None

    def parser_error(self, production=None):
        """Raises a :class:`ParserError` at the current position"""
        raise ParserError(production, self)

    def peek(self, nchars):
        """Returns the next *nchars* characters.

        If there are fewer than nchars remaining then a shorter string is
        returned."""
        return self.src[self.pos:self.pos + nchars]

    def match_end(self):
        """True if all of :attr:`src` has been parsed"""
        return self.the_char is None

    def match(self, match_string):
        """Returns true if *match_string* is at the current position"""
        if self.the_char is None:
            return False
        else:
            return self.src[self.pos:self.pos +
                            len(match_string)] == match_string

    def parse(self, match_string):
        """Parses *match_string*

        Returns *match_string* or None if it cannot be parsed."""
        if self.match(match_string):
            self.setpos(self.pos + len(match_string))
            return match_string
        else:
            return None

    def require(self, match_string, production=None):
        """Parses and requires *match_string*

        production
            Optional name of production, defaults to match_string itself.

        Returns match_string on success."""
        if not self.parse(match_string):
            if production is None:
                production = match_string
            self.parser_error(production)
        else:
            return match_string

    def parse_until(self, match_string):
        """Parses up to but not including *match_string*.

        Advances the parser to the first character *of* match_string.
        If match_string is not found (or is None) then all the remaining
        characters in the source are parsed.

        Returns the parsed text, even if empty.  Never returns None."""
        if match_string is None:
            match_pos = -1
        else:
            match_pos = self.src.find(match_string, self.pos)
        if match_pos == -1:
            result = self.src[self.pos:]
            self.setpos(len(self.src))
        else:
            result = self.src[self.pos:match_pos]
            self.setpos(match_pos)
        return result

    def match_one(self, match_chars):
        """Returns true if one of *match_chars* is at the current position"""
        if self.the_char is None:
            return False
        else:
            return self.the_char in match_chars

    def parse_one(self, match_chars):
        """Parses one of *match_chars*

        Returns the character or None if no match is found."""
        if self.match_one(match_chars):
            result = self.the_char
            self.next_char()
            return result
        else:
            return None
