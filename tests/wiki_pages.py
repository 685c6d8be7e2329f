"""
Builders for small Wiktionary-shaped pages used across the tests.
"""

from typing import List


def toc_item(level: int, anchor: str, text: str, children: str = "") -> str:
    nested = f"<ul>{children}</ul>" if children else ""
    return (
        f'<li class="toclevel-{level}"><a href="#{anchor}">'
        f'<span class="tocnumber">{level}</span> <span class="toctext">{text}</span></a>{nested}</li>'
    )


def etymology_item(number: int, pos_items: List[str]) -> str:
    return toc_item(2, f"Etymology_{number}", f"Etymology {number}", "".join(pos_items))


def language_toc(anchor: str, text: str, items: List[str]) -> str:
    return toc_item(1, anchor, text, "".join(items))


def toc(*language_entries: str) -> str:
    return f'<div id="toc" class="toc"><ul>{"".join(language_entries)}</ul></div>'


def heading(anchor: str, title: str, level: int = 4) -> str:
    return f'<h{level}><span class="mw-headline" id="{anchor}">{title}</span></h{level}>'


def definitions(*items: str) -> str:
    return "<ol>" + "".join(f"<li>{item}</li>" for item in items) + "</ol>"


def pronunciation(ipa: str) -> str:
    return heading("Pronunciation", "Pronunciation", 3) + f'<ul><li>IPA: <span class="IPA">{ipa}</span></li></ul>'


def page(*parts: str) -> str:
    return "<html><body>" + "".join(parts) + "</body></html>"


def single_noun_page(*extra: str) -> str:
    return page(
        toc(language_toc("English", "English", [toc_item(2, "Noun", "Noun")])),
        heading("English", "English", 2),
        *extra,
        heading("Noun", "Noun"),
        "<p><b>test</b> (plural tests)</p>",
        definitions("A tool.\nExample one.", "Another sense."),
    )


def two_etymology_verb_page() -> str:
    return page(
        toc(
            language_toc(
                "English",
                "English",
                [
                    etymology_item(1, [toc_item(3, "Verb", "Verb")]),
                    etymology_item(2, [toc_item(3, "Verb_2", "Verb")]),
                ],
            )
        ),
        heading("English", "English", 2),
        heading("Etymology_1", "Etymology 1", 3),
        heading("Verb", "Verb"),
        definitions("To run quickly."),
        heading("Etymology_2", "Etymology 2", 3),
        heading("Verb_2", "Verb"),
        definitions("To walk slowly."),
    )
