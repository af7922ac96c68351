"""
Nested style tree to css text.

References:
    - [basics](https://developer.mozilla.org/en-US/docs/Learn/CSS/First_steps/How_CSS_is_structured)
    - [nesting](https://developer.chrome.com/articles/css-nesting/)
    - [nesting selector](https://developer.mozilla.org/en-US/docs/Web/CSS/Nesting_selector)

<style-tree>
    <selector/>: {
        <property/>: <value/>,
        <selector/>: { ... },
    }
</style-tree>

property => emitted verbatim,
value => int, float, or str, emitted verbatim,
selector => `b` under `a` is `a b`, `&:hover` under `a` is `a:hover`,
"""

from nestcss.css.compiler import format_value, generate_rules, to_css_text
from nestcss.css.selector import PARENT, compose_selector

__all__ = ["to_css_text", "generate_rules", "format_value", "compose_selector", "PARENT"]
