"""Build CSS selectors with ordering checks, then join them with combinators."""

from ladrillo import SelectorOrderError, by_element, by_id, combine

print(by_id("main").class_("container").class_("editable").stringify())
print(by_element("a").attr('href$=".png"').pseudo_class("focus").stringify())

rows = combine(
    by_element("tr").pseudo_class("nth-of-type(even)"),
    " ",
    by_element("td").pseudo_class("nth-of-type(even)"),
)
table = combine(by_element("table").id("data"), "~", rows)
print(combine(by_element("div").id("main").class_("container"), "+", table))

try:
    by_element("p").class_("lead").id("intro")
except SelectorOrderError as exc:
    print("Rejected:", exc)
