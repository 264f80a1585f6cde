"""
Translator options - Backend profiles and per-instance configuration.

Robot Framework can drive a browser through two libraries:

- Browser (Playwright based), the primary backend
- SeleniumLibrary, the alternate backend

Everything that differs between them (keywords, selector prefixes,
what they can express) lives in a BackendProfile. A TranslatorConfig
picks one profile once, at construction time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Backend(str, Enum):
    """Robot Framework browser automation libraries."""
    BROWSER = "browser"
    SELENIUM = "selenium"


@dataclass(frozen=True)
class BackendProfile:
    """
    Keyword vocabulary and capabilities of one backend.

    Attributes:
        backend: Backend this profile describes
        library: Library name imported in the Settings section
        open_browser: Keyword line opening the browser
        keywords: Keyword template per step type; ``{selector}``,
            ``{value}``, ``{url}`` and ``{key}`` are substituted
        css_prefix: Prefix put in front of CSS selectors
        xpath_prefix: Prefix put in front of XPath selectors
        locator_strategies: Explicit locator strategies of the library;
            a selector already written as ``strategy=value`` or
            ``strategy:value`` is emitted without prefix
        supports_text_selectors: Whether a quoted text locator is understood
        supports_key_release: Whether key down/up can be sent separately
        groups_key_presses: Whether adjacent key presses form one chord
    """
    backend: Backend
    library: str
    open_browser: str
    keywords: Dict[str, str] = field(default_factory=dict)
    css_prefix: str = ""
    xpath_prefix: str = ""
    locator_strategies: Tuple[str, ...] = ()
    supports_text_selectors: bool = True
    supports_key_release: bool = True
    groups_key_presses: bool = False


BROWSER_PROFILE = BackendProfile(
    backend=Backend.BROWSER,
    library="Browser",
    open_browser="New Browser    chromium    headless=false",
    keywords={
        "click": "Click  {selector}",
        "change": "Fill Text  {selector}  {value}",
        "navigate": "New Page  {url}",
        "hover": "Hover  {selector}",
        "doubleClick": "Click With Options  {selector}  clickCount=2",
        "keyDown": "Keyboard Key  down  {key}",
        "keyUp": "Keyboard Key  up  {key}",
        "waitForElement": "Wait For Elements State  {selector}  attached",
    },
)

SELENIUM_PROFILE = BackendProfile(
    backend=Backend.SELENIUM,
    library="SeleniumLibrary",
    open_browser="Open Browser",
    keywords={
        "click": "Click Element  {selector}",
        "change": "Input Text  {selector}  {value}",
        "navigate": "Go To  {url}",
        "hover": "Mouse Over  {selector}",
        # No click count in SeleniumLibrary: degrades to a single click
        "doubleClick": "Click Element  {selector}",
        "keyDown": "Press Keys  None  {key}",
        "keyUp": (
            "# With the Selenium library, it is not possible to release a key (here {key}), "
            "instead the above \"Press Keys\" should both press the key and release it, "
            "but you may need to fine tune it if multiple keys are pressed at the same time"
        ),
        "waitForElement": "Wait Until Page Contains Element  {selector}",
    },
    css_prefix="css:",
    xpath_prefix="xpath:",
    locator_strategies=(
        "id", "name", "identifier", "class", "tag", "xpath", "css",
        "dom", "link", "partial link", "data",
    ),
    # https://robotframework.org/SeleniumLibrary/SeleniumLibrary.html#Locating%20elements
    supports_text_selectors=False,
    supports_key_release=False,
    groups_key_presses=True,
)

BACKEND_PROFILES: Dict[Backend, BackendProfile] = {
    Backend.BROWSER: BROWSER_PROFILE,
    Backend.SELENIUM: SELENIUM_PROFILE,
}


@dataclass(frozen=True)
class TranslatorConfig:
    """
    Options fixed when a translator is created.

    Attributes:
        prefer_aria_as_text: Try an ARIA label or text selector, rendered as
            a quoted text locator, before plain CSS
        targets_alternate_backend: Generate for SeleniumLibrary instead of
            the Browser library
    """
    prefer_aria_as_text: bool = False
    targets_alternate_backend: bool = False

    @property
    def backend(self) -> Backend:
        """Backend selected by this configuration."""
        return Backend.SELENIUM if self.targets_alternate_backend else Backend.BROWSER

    @property
    def profile(self) -> BackendProfile:
        """Profile of the selected backend."""
        return BACKEND_PROFILES[self.backend]

    @classmethod
    def for_backend(cls, backend: Backend | str, prefer_aria_as_text: bool = False) -> "TranslatorConfig":
        """
        Build a configuration from a backend name.

        Args:
            backend: Backend or its value ("browser", "selenium")
            prefer_aria_as_text: See class attributes

        Returns:
            TranslatorConfig for that backend
        """
        return cls(
            prefer_aria_as_text=prefer_aria_as_text,
            targets_alternate_backend=Backend(backend) is Backend.SELENIUM,
        )
