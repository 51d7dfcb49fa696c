"""
Dependency Injection Module
Single Responsibility: Configure all dependency bindings for the trimmer.
"""
from injector import Binder, Module, provider, singleton

from smart_trim.application.contracts.html_corrector import IHTMLCorrector
from smart_trim.application.contracts.link_renderer import ILinkRenderer
from smart_trim.application.contracts.summarizer import ISummarizer
from smart_trim.application.services.extension_composer import ExtensionComposer
from smart_trim.application.services.trimmer import Trimmer
from smart_trim.application.services.truncator import Truncator
from smart_trim.infrastructure.external.beautiful_soup_corrector import (
    BeautifulSoupCorrector,
)
from smart_trim.infrastructure.external.link_renderer import (
    BeautifulSoupLinkRenderer,
)
from smart_trim.infrastructure.external.text_summarizer import TextSummarizer
from smart_trim.settings import Settings


class TrimmerModule(Module):
    def __init__(self, settings: Settings):
        self._settings = settings

    def configure(self, binder: Binder):
        binder.bind(Settings, to=self._settings, scope=singleton)
        binder.bind(IHTMLCorrector, to=BeautifulSoupCorrector, scope=singleton)
        binder.bind(ILinkRenderer, to=BeautifulSoupLinkRenderer, scope=singleton)

    @singleton
    @provider
    def provide_summarizer(
        self, corrector: IHTMLCorrector, settings: Settings
    ) -> ISummarizer:
        return TextSummarizer(corrector=corrector, settings=settings)

    @singleton
    @provider
    def provide_truncator(
        self, summarizer: ISummarizer, corrector: IHTMLCorrector
    ) -> Truncator:
        return Truncator(summarizer=summarizer, corrector=corrector)

    @singleton
    @provider
    def provide_extension_composer(
        self, link_renderer: ILinkRenderer, settings: Settings
    ) -> ExtensionComposer:
        return ExtensionComposer(
            link_renderer=link_renderer, more_link_class=settings.more_link_class
        )

    @singleton
    @provider
    def provide_trimmer(
        self, truncator: Truncator, composer: ExtensionComposer
    ) -> Trimmer:
        return Trimmer(truncator=truncator, composer=composer)
