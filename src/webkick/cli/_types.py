"""Enums for CLI options."""

from enum import Enum


class ViewEngine(str, Enum):
    """Available view template engines."""

    JADE = "jade"
    EJS = "ejs"
    HBS = "hbs"
    HOGAN = "hogan"
    PUG = "pug"
    NUNJUCKS = "nunjucks"

    @property
    def label(self) -> str:
        labels: dict[ViewEngine, str] = {
            ViewEngine.JADE: "Jade",
            ViewEngine.EJS: "EJS",
            ViewEngine.HBS: "Handlebars",
            ViewEngine.HOGAN: "Hogan.js",
            ViewEngine.PUG: "Pug",
            ViewEngine.NUNJUCKS: "Nunjucks",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[ViewEngine, str] = {
            ViewEngine.JADE: "Indentation-based templates. The default engine.",
            ViewEngine.EJS: "Embedded JavaScript in plain HTML. No layout file.",
            ViewEngine.HBS: "Handlebars views with a shared layout.",
            ViewEngine.HOGAN: "Mustache templates compiled by Hogan.js. No layout file.",
            ViewEngine.PUG: "Successor of Jade with the same indentation syntax.",
            ViewEngine.NUNJUCKS: "Jinja2-style templates with block inheritance.",
        }
        return descriptions[self]

    @property
    def extension(self) -> str:
        """File extension of the generated view files."""
        extensions: dict[ViewEngine, str] = {
            ViewEngine.JADE: "jade",
            ViewEngine.EJS: "ejs",
            ViewEngine.HBS: "hbs",
            ViewEngine.HOGAN: "hjs",
            ViewEngine.PUG: "pug",
            ViewEngine.NUNJUCKS: "njk",
        }
        return extensions[self]

    @property
    def views(self) -> tuple[str, ...]:
        """Names of the view templates copied for this engine."""
        if self in (ViewEngine.EJS, ViewEngine.HOGAN):
            return ("index", "error")
        return ("index", "layout", "error")


class CssEngine(str, Enum):
    """Stylesheet preprocessors."""

    LESS = "less"
    STYLUS = "stylus"
    COMPASS = "compass"
    SASS = "sass"

    @property
    def label(self) -> str:
        labels: dict[CssEngine, str] = {
            CssEngine.LESS: "Less",
            CssEngine.STYLUS: "Stylus",
            CssEngine.COMPASS: "Compass (SCSS)",
            CssEngine.SASS: "Sass",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[CssEngine, str] = {
            CssEngine.LESS: "Compiled on request by less-middleware.",
            CssEngine.STYLUS: "Compiled on request by the stylus middleware.",
            CssEngine.COMPASS: "SCSS compiled through node-compass.",
            CssEngine.SASS: "Indented Sass compiled by node-sass-middleware.",
        }
        return descriptions[self]
