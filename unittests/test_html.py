#! /usr/bin/env python

import logging
import unittest

import tagkit.html as html

from tagkit.errors import IncompleteTagError, InvalidArgument
from tagkit.tagtypes import (
    Align,
    Direction,
    Method,
    OrderedListType,
    UnorderedListType,
    VAlign)


def suite():
    loader = unittest.TestLoader()
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(HelperTests),
        loader.loadTestsFromTestCase(TextTests),
        loader.loadTestsFromTestCase(FormInputTests),
        loader.loadTestsFromTestCase(ListTests),
        loader.loadTestsFromTestCase(TableTests),
    ))


class HelperTests(unittest.TestCase):

    def test_attr(self):
        self.assertTrue(html.attr('name', None) == '')
        self.assertTrue(html.attr('name', '') == '')
        self.assertTrue(html.attr('size', 3) == ' size="3"')
        self.assertTrue(html.attr('value', 'say "<hi>"') ==
                        ' value="say &quot;&lt;hi&gt;&quot;"')
        self.assertTrue(html.fo_attr('font-size', '9pt') ==
                        " font-size='9pt'")

    def test_fo_apostrophe(self):
        self.assertTrue(html.fo_attr('color', "a'b") == " color='a&apos;b'")
        self.assertTrue(html.fo_attr('title', '"<x>"') ==
                        " title='&quot;&lt;x&gt;&quot;'")
        link = html.HTMLHyperlink("http://h/it's", "x")
        self.assertTrue(
            link.get_fo_tag() ==
            "<fo:basic-link external-destination='http://h/it&apos;s'>x"
            "</fo:basic-link>")
        t = html.HTMLText("x")
        t.color = "a'b"
        self.assertTrue(
            t.get_fo_tag() == "<fo:inline color='a&apos;b'>x</fo:inline>")
        # HTML attributes use double quotes, apostrophes are left alone
        t = html.TextFormInput("q", "it's")
        self.assertTrue(
            t.get_tag() == '<input type="text" name="q" value="it\'s" />')

    def test_length(self):
        self.assertTrue(html.get_length(0) is None)
        self.assertTrue(html.get_length(0, True) is None)
        self.assertTrue(html.get_length(50) == "50")
        self.assertTrue(html.get_length(50, True) == "50%")

    def test_labels(self):
        self.assertTrue(html.roman_numeral(1) == "I")
        self.assertTrue(html.roman_numeral(4) == "IV")
        self.assertTrue(html.roman_numeral(1994) == "MCMXCIV")
        self.assertTrue(html.letter_label(1) == "A")
        self.assertTrue(html.letter_label(26) == "Z")
        self.assertTrue(html.letter_label(27) == "AA")
        self.assertTrue(html.letter_label(52) == "AZ")


class TextTests(unittest.TestCase):

    def test_text(self):
        t = html.HTMLText("Hello")
        self.assertTrue(str(t) == "Hello")
        t.bold = True
        t.fixed = True
        self.assertTrue(t.get_tag() == "<b><tt>Hello</tt></b>")
        t.size = 3
        t.color = "#FF0000"
        self.assertTrue(
            t.get_tag() ==
            '<font size="3" color="#FF0000"><b><tt>Hello</tt></b></font>')
        t = html.HTMLText("Hi")
        t.italic = True
        t.underscore = True
        t.alignment = Align.center
        self.assertTrue(t.get_tag() ==
                        '<div align="center"><i><u>Hi</u></i></div>')
        self.assertTrue(t.get_tag(use_alignment=False) == "<i><u>Hi</u></i>")
        self.assertTrue(t.get_tag("Bye", False) == "<i><u>Bye</u></i>")
        self.assertTrue(t.text == "Hi")
        t.language = "en"
        t.direction = Direction.rtl
        self.assertTrue(
            t.get_tag() ==
            '<div align="center" lang="en" dir="rtl"><i><u>Hi</u></i></div>')
        self.assertTrue(
            t.get_fo_tag() ==
            "<fo:block text-align='center'><fo:inline font-style='italic' "
            "text-decoration='underline'>Hi</fo:inline></fo:block>")

    def test_text_checks(self):
        t = html.HTMLText()
        self.assertRaises(IncompleteTagError, t.get_tag)
        self.assertRaises(IncompleteTagError, t.get_fo_tag)
        try:
            t.size = 8
            self.fail("size = 8")
        except InvalidArgument:
            pass
        try:
            t.alignment = "center"
            self.fail("alignment = 'center'")
        except InvalidArgument:
            pass
        self.assertRaises(InvalidArgument, setattr, t, 'text', None)
        self.assertRaises(InvalidArgument, setattr, t, 'direction', 3)

    def test_hyperlink(self):
        link = html.HTMLHyperlink("http://www.example.com/", "Example")
        self.assertTrue(
            link.get_tag() ==
            '<a href="http://www.example.com/">Example</a>')
        link.name = "ex"
        link.title = "An Example"
        link.target = "_blank"
        link.location = "top"
        link.properties = {'a': '1', 'b': 'x"y'}
        self.assertTrue(
            link.get_url() == 'http://www.example.com/?a=1&b=x"y#top')
        self.assertTrue(
            link.get_tag() ==
            '<a href="http://www.example.com/?a=1&amp;b=x&quot;y#top" '
            'name="ex" title="An Example" target="_blank">Example</a>')
        self.assertTrue(
            link.get_tag(html.HTMLText("Bold")) ==
            '<a href="http://www.example.com/?a=1&amp;b=x&quot;y#top" '
            'name="ex" title="An Example" target="_blank">Bold</a>')
        link = html.HTMLHyperlink("http://h/", "Home")
        self.assertTrue(
            link.get_fo_tag() ==
            "<fo:basic-link external-destination='http://h/'>Home"
            "</fo:basic-link>")
        self.assertRaises(IncompleteTagError, html.HTMLHyperlink().get_tag,
                          "text")
        self.assertRaises(IncompleteTagError, html.HTMLHyperlink("x").get_tag)

    def test_heading(self):
        h = html.HTMLHeading(2, "Contents")
        self.assertTrue(str(h) == "<h2>Contents</h2>")
        h.align = Align.right
        h.language = "ar"
        h.direction = Direction.rtl
        self.assertTrue(
            str(h) == '<h2 align="right" lang="ar" dir="rtl">Contents</h2>')
        self.assertTrue(
            h.get_fo_tag() ==
            "<fo:block-container writing-mode='rl'>\n"
            "<fo:block font-size='20pt' text-align='right'>Contents"
            "</fo:block>\n</fo:block-container>\n")
        h = html.HTMLHeading(text="Title")
        self.assertTrue(h.level == 1)
        self.assertTrue(h.get_fo_tag().startswith(
            "<fo:block-container writing-mode='lr'>\n"
            "<fo:block font-size='25pt'>"))
        for level in (0, 7, None):
            try:
                html.HTMLHeading(level, "x")
                self.fail("heading level %s" % repr(level))
            except InvalidArgument:
                pass
        self.assertRaises(IncompleteTagError, html.HTMLHeading(3).get_tag)

    def test_events(self):
        events = []
        h = html.HTMLHeading(1, "A")
        h.add_property_change_listener(events.append)
        h.text = "B"
        h.level = 4
        self.assertTrue([(e.name, e.old_value, e.new_value) for e in events] ==
                        [("text", "A", "B"), ("level", 1, 4)])


class FormInputTests(unittest.TestCase):

    def test_text(self):
        t = html.TextFormInput("userID")
        self.assertTrue(str(t) == '<input type="text" name="userID" />')
        t.value = "Mr <X>"
        t.size = 40
        t.max_length = 10
        t.language = "en"
        self.assertTrue(
            str(t) ==
            '<input type="text" name="userID" value="Mr &lt;X&gt;" '
            'size="40" maxlength="10" lang="en" />')
        self.assertRaises(InvalidArgument, setattr, t, 'size', -1)
        self.assertRaises(InvalidArgument, setattr, t, 'max_length', -1)
        self.assertRaises(IncompleteTagError, html.TextFormInput().get_tag)

    def test_password(self):
        p = html.PasswordFormInput("pw", "secret")
        self.assertTrue(
            p.get_tag() == '<input type="password" name="pw" value="secret" />')

    def test_hidden(self):
        h = html.HiddenFormInput("id", "42")
        h.size = 10
        self.assertTrue(
            h.get_tag() == '<input type="hidden" name="id" value="42" />')
        self.assertRaises(IncompleteTagError, html.HiddenFormInput().get_tag)

    def test_buttons(self):
        b = html.ButtonFormInput("button1", "Press Me", "test()")
        self.assertTrue(
            b.get_tag() ==
            '<input type="button" name="button1" value="Press Me" '
            'onclick="test()" />')
        self.assertTrue(html.SubmitFormInput(value="Send").get_tag() ==
                        '<input type="submit" value="Send" />')
        self.assertTrue(html.ResetFormInput().get_tag() ==
                        '<input type="reset" />')

    def test_toggles(self):
        c = html.CheckboxFormInput("uscitizen", "yes", "textLabel", True)
        self.assertTrue(
            c.get_tag() ==
            '<input type="checkbox" name="uscitizen" value="yes" '
            'checked="checked" /> textLabel')
        c.checked = False
        self.assertTrue(
            c.get_tag() ==
            '<input type="checkbox" name="uscitizen" value="yes" /> '
            'textLabel')
        r = html.RadioFormInput("age", "twentysomething")
        self.assertFalse(r.checked)
        self.assertTrue(
            r.get_tag() ==
            '<input type="radio" name="age" value="twentysomething" />')

    def test_select(self):
        s = html.SelectFormElement("list1")
        s.add_option("Option1", "opt1")
        option2 = s.add_option("Option2", "opt2", True)
        self.assertTrue(isinstance(option2, html.SelectOption))
        self.assertTrue(
            str(s) ==
            '<select name="list1">\n'
            '<option value="opt1">Option1</option>\n'
            '<option value="opt2" selected="selected">Option2</option>\n'
            '</select>')
        # only one option may be selected unless multiple is set
        self.assertRaises(InvalidArgument, s.add_option, "Option3", "opt3",
                          True)
        self.assertTrue(s.option_count() == 2)
        s.multiple = True
        s.size = 3
        s.add_option(html.SelectOption("Option3", "opt3", True))
        self.assertTrue(s.option_count() == 3)
        self.assertTrue(len(s.get_selected()) == 2)
        self.assertTrue(s.get_tag().startswith(
            '<select name="list1" size="3" multiple="multiple">\n'))
        s.remove_option(option2)
        self.assertTrue(s.option_count() == 2)
        s.remove_option(option2)
        self.assertTrue(s.option_count() == 2)
        self.assertFalse("opt2" in s.get_tag())
        self.assertRaises(InvalidArgument, s.add_option, "Option4")
        self.assertRaises(InvalidArgument, s.add_option, None)
        self.assertRaises(IncompleteTagError,
                          html.SelectFormElement().get_tag)
        self.assertRaises(IncompleteTagError, html.SelectOption().get_tag)

    def test_form(self):
        f = html.HTMLForm("http://host/servlet")
        self.assertTrue(
            str(f) == '<form action="http://host/servlet" method="get">\n'
            '</form>')
        events = []
        f.add_property_change_listener(events.append)
        text = f.add_element(html.TextFormInput("userID"))
        f.add_element(html.SubmitFormInput(value="Send"))
        f.method = Method.post
        f.target = "_blank"
        f.hidden_parameters = {'session': '1'}
        expected = (
            '<form action="http://host/servlet" method="post" '
            'target="_blank">\n'
            '<input type="hidden" name="session" value="1" />\n'
            '<input type="text" name="userID" />\n'
            '<input type="submit" value="Send" />\n'
            '</form>')
        self.assertTrue(f.get_tag() == expected)
        # generating the tag does not add the hidden inputs as elements
        self.assertTrue(f.get_tag() == expected)
        self.assertTrue(len(f.elements) == 2)
        f.remove_element(text)
        self.assertFalse("userID" in f.get_tag())
        f.remove_element(text)
        self.assertTrue(len(f.elements) == 1)
        self.assertTrue(len(events) == 6)
        self.assertTrue(Method.POST == Method.post)
        self.assertTrue(Method.DEFAULT == Method.get)
        self.assertRaises(InvalidArgument, setattr, f, 'method', 3)
        self.assertRaises(InvalidArgument, setattr, f, 'hidden_parameters',
                          None)
        self.assertRaises(InvalidArgument, f.add_element, None)
        self.assertRaises(IncompleteTagError, html.HTMLForm().get_tag)

    def test_form_fo(self):
        f = html.HTMLForm("http://host/order")
        heading = html.HTMLHeading(1, "Order")
        f.add_element(heading)
        f.add_element(html.TextFormInput("qty"))
        f.add_element(html.SelectFormElement("size"))
        self.assertTrue(
            f.get_fo_tag() ==
            "<fo:block-container writing-mode='lr'>\n%s"
            "</fo:block-container>\n" % heading.get_fo_tag())


class ListTests(unittest.TestCase):

    def test_ordered(self):
        ol = html.OrderedList(["one", "two"])
        self.assertTrue(
            ol.get_tag() == "<ol>\n<li>one</li>\n<li>two</li>\n</ol>\n")
        ol.list_type = OrderedListType.SMALL_ROMAN
        ol.start = 3
        ol.compact = True
        self.assertTrue(
            ol.get_tag() ==
            '<ol type="i" start="3" compact="compact">\n'
            '<li>one</li>\n<li>two</li>\n</ol>\n')
        fo = ol.get_fo_tag()
        self.assertTrue(fo.startswith("<fo:list-block writing-mode='lr'>\n"))
        self.assertTrue("<fo:block>iii.</fo:block>" in fo)
        self.assertTrue("<fo:block>iv.</fo:block>" in fo)
        self.assertTrue("<fo:list-item-body><fo:block>two</fo:block>" in fo)
        self.assertRaises(InvalidArgument, setattr, ol, 'start', 0)
        self.assertRaises(InvalidArgument, setattr, ol, 'list_type',
                          UnorderedListType.disc + 10)

    def test_nested(self):
        inner = html.UnorderedList(["a", "b"], UnorderedListType.square)
        outer = html.OrderedList(list_type=OrderedListType.CAPITALS)
        outer.add_item("first")
        outer.add_item(inner)
        outer.add_item("second")
        self.assertTrue(
            outer.get_tag() ==
            '<ol type="A">\n<li>first</li>\n'
            '<li><ul type="square">\n<li>a</li>\n<li>b</li>\n</ul>\n</li>\n'
            '<li>second</li>\n</ol>\n')
        fo = outer.get_fo_tag()
        self.assertTrue("<fo:block>A.</fo:block>" in fo)
        # the nested list does not use up a label
        self.assertTrue("<fo:block>B.</fo:block>" in fo)
        self.assertFalse("<fo:block>C.</fo:block>" in fo)
        self.assertTrue("<fo:block>▪</fo:block>" in fo)

    def test_items(self):
        events = []
        ul = html.UnorderedList()
        ul.add_property_change_listener(events.append)
        self.assertRaises(IncompleteTagError, ul.get_tag)
        item = ul.add_item("x")
        self.assertTrue(isinstance(item, html.ListItem))
        item.language = "fr"
        self.assertTrue(ul.get_tag() == '<ul>\n<li lang="fr">x</li>\n</ul>\n')
        ul.remove_item(item)
        self.assertTrue(len(events) == 2)
        self.assertRaises(InvalidArgument, ul.add_item, None)


class TableTests(unittest.TestCase):

    def test_cell(self):
        c = html.HTMLTableCell("data")
        self.assertTrue(c.get_tag() == "<td>data</td>\n")
        c.align = Align.center
        c.valign = VAlign.top
        c.col_span = 2
        c.row_span = 3
        c.height = 10
        c.width = 50
        c.width_percent = True
        c.nowrap = True
        c.direction = Direction.ltr
        self.assertTrue(
            c.get_tag() ==
            '<td align="center" valign="top" rowspan="3" colspan="2" '
            'height="10" width="50%" nowrap="nowrap" dir="ltr">data</td>\n')
        c.height_percent = True
        self.assertTrue(' height="10%" width="50%"' in c.get_tag())
        self.assertRaises(InvalidArgument, setattr, c, 'height', -1)
        c = html.HTMLTableCell(html.HTMLText("x"))
        c.header = True
        self.assertTrue(c.get_tag() == "<th>x</th>\n")
        self.assertTrue(c.get_tag("y") == "<th>y</th>\n")
        self.assertRaises(InvalidArgument, setattr, c, 'col_span', 0)
        self.assertRaises(IncompleteTagError, html.HTMLTableCell().get_tag)

    def test_table(self):
        t = html.HTMLTable([["a", "b"], ["c", "d"]])
        t.border = 1
        t.caption = "Letters"
        t.header = ["First", html.HTMLText("Second")]
        self.assertTrue(
            t.get_tag() ==
            '<table border="1">\n<caption>Letters</caption>\n'
            '<tr>\n<th>First</th>\n<th>Second</th>\n</tr>\n'
            '<tr>\n<td>a</td>\n<td>b</td>\n</tr>\n'
            '<tr>\n<td>c</td>\n<td>d</td>\n</tr>\n</table>\n')
        row = html.HTMLTableRow()
        self.assertRaises(IncompleteTagError, row.get_tag)
        row.align = Align.left
        row.add_cell("e")
        t.add_row(row)
        self.assertTrue('<tr align="left">\n<td>e</td>\n</tr>\n' in
                        t.get_tag())
        self.assertRaises(IncompleteTagError, html.HTMLTable().get_tag)

    def test_table_rows(self):
        t = html.HTMLTable([["a"], ["b"], ["c"]])
        self.assertTrue(t.row_count() == 3)
        self.assertTrue(t.get_row(1).cells[0].element == "b")
        self.assertRaises(InvalidArgument, t.get_row, 3)
        self.assertRaises(InvalidArgument, t.get_row, -1)
        events = []
        t.add_property_change_listener(events.append)
        t.remove_row(1)
        self.assertTrue([r.cells[0].element for r in t.rows] == ["a", "c"])
        t.remove_row(t.get_row(0))
        self.assertTrue(t.row_count() == 1)
        # a row that is not in the table is ignored
        t.remove_row(html.HTMLTableRow(["z"]))
        self.assertTrue(t.row_count() == 1)
        self.assertRaises(InvalidArgument, t.remove_row, 5)
        self.assertRaises(InvalidArgument, t.remove_row, None)
        t.remove_all_rows()
        self.assertTrue(t.row_count() == 0)
        self.assertTrue(len(events) == 3)

    def test_table_attributes(self):
        t = html.HTMLTable([["a", "b"]])
        t.alignment = Align.center
        t.width = 80
        t.width_percent = True
        t.header = ["x", "y"]
        self.assertTrue(t.header_in_use)
        self.assertTrue(
            t.get_tag() ==
            '<table align="center" width="80%">\n'
            '<tr>\n<th>x</th>\n<th>y</th>\n</tr>\n'
            '<tr>\n<td>a</td>\n<td>b</td>\n</tr>\n</table>\n')
        t.header_in_use = False
        self.assertFalse("<th>" in t.get_tag())
        t.header_in_use = True
        t.header = ["x"]
        # one heading per column is required
        self.assertRaises(InvalidArgument, t.get_tag)
        t.header_in_use = False
        self.assertTrue("<td>b</td>" in t.get_tag())
        self.assertRaises(InvalidArgument, setattr, t, 'alignment',
                          Align.justify)

    def test_table_header_string(self):
        t = html.HTMLTable([["a"]])
        self.assertRaises(InvalidArgument, setattr, t, 'header', "Name")
        self.assertTrue(t.header is None)
        t.header = ("Name",)
        self.assertTrue(t.header == ["Name"])
        self.assertTrue("<th>Name</th>\n" in t.get_tag())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    unittest.main()
