"""
References:
    - [basics](https://developer.mozilla.org/en-US/docs/Learn/CSS/First_steps/How_CSS_is_structured)
    - [@media](https://developer.mozilla.org/en-US/docs/Web/CSS/@media)
    - [@keyframes](https://developer.mozilla.org/en-US/docs/Web/CSS/@keyframes)
    - [class selectors](https://developer.mozilla.org/en-US/docs/Web/CSS/Class_selectors)

<ruleset>
    <selector/> <block>
        <property/>: <value/>;
        <at-rule/> <block>
            <ruleset/>
        </block>
    </block>
</ruleset>

selector => element, class, id, pseudo, descendant, at-rule header,
property => ident (`background_color`) or css name (`background-color`),
value => bool, int, float, str or a list of them, or another block,
"""
from jss.css.properties import PropertyTable, resolve
from jss.css.render import Renderer, Rules, StyleTree, process_css, render, style
from jss.css.selector import class_namespaced, selector_namespaced

__all__ = [
    "PropertyTable",
    "resolve",
    "Renderer",
    "Rules",
    "StyleTree",
    "process_css",
    "render",
    "style",
    "class_namespaced",
    "selector_namespaced",
]
