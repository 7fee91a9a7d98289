from __future__ import annotations

from _infra import banner

from drills import Combinator, OutOfOrderError, css


def main() -> None:
    banner("01_selectors: compound selectors + combine")

    card = css.element("div").set_id("main").add_class("container").add_class("draggable")
    rows = css.combine(
        css.element("tr").add_pseudo_class("nth-of-type(even)"),
        Combinator.DESCENDANT,
        css.element("td").add_pseudo_class("nth-of-type(even)"),
    )
    print(css.combine(card, Combinator.NEXT_SIBLING, css.combine(css.element("table").set_id("data"), "~", rows)))

    link = css.element("a").add_attribute('href$=".png"')
    try:
        link.add_class("thumb")
    except OutOfOrderError as err:
        print(f"rejected: {err}")
    print(link.add_pseudo_class("focus"))


if __name__ == "__main__":
    main()
