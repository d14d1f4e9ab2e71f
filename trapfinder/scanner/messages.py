"""Maps pipeline exceptions to the text shown in the Error state."""

from trapfinder.analysis.exceptions import (
    AnalysisError,
    AnalysisNetworkError,
    AnalysisTimeoutError,
    DecodingError,
    HttpStatusError,
    MissingApiKeyError,
)
from trapfinder.i18n import strings
from trapfinder.i18n.language import Language
from trapfinder.pdf.exceptions import PdfLoadError, PdfNoPagesError
from trapfinder.scanner.exceptions import IngestionFatalError, NoTextRecognizedError
from trapfinder.web.exceptions import (
    EmptyPageError,
    InvalidUrlError,
    WebHttpStatusError,
    WebNetworkError,
    WebParseError,
    WebTimeoutError,
)


def error_message(
    exc: BaseException,
    language: Language,
    *,
    include_details: bool = False,
) -> str:
    """Human-readable explanation of *exc* in *language*.

    ``include_details`` appends raw HTTP error bodies for diagnostic builds.
    """
    if isinstance(exc, AnalysisError):
        return _analysis_message(exc, language, include_details)
    if isinstance(exc, InvalidUrlError):
        return strings.INVALID_URL.text(language)
    if isinstance(exc, WebHttpStatusError):
        return _web_status_message(exc.status_code, language)
    if isinstance(exc, WebTimeoutError):
        return strings.WEB_TIMEOUT.text(language)
    if isinstance(exc, WebNetworkError):
        return strings.WEB_NETWORK_ERROR.text(language)
    if isinstance(exc, WebParseError):
        return strings.WEB_PARSE_ERROR.text(language)
    if isinstance(exc, EmptyPageError):
        return strings.WEB_PAGE_LOAD_ERROR.text(language)
    if isinstance(exc, PdfNoPagesError):
        return strings.PDF_NO_PAGES.text(language)
    if isinstance(exc, PdfLoadError):
        return strings.PDF_LOAD_ERROR.text(language)
    if isinstance(exc, NoTextRecognizedError):
        return strings.TEXT_RECOGNITION_ERROR.text(language)
    if isinstance(exc, IngestionFatalError):
        return strings.FILE_LOAD_ERROR.format(language, detail=str(exc))
    return strings.ANALYSIS_ERROR.format(language, detail=str(exc) or type(exc).__name__)


def _analysis_message(exc: AnalysisError, language: Language, include_details: bool) -> str:
    if isinstance(exc, MissingApiKeyError):
        return strings.MISSING_API_KEY.text(language)
    if isinstance(exc, AnalysisTimeoutError):
        return strings.ANALYSIS_TIMEOUT.text(language)
    if isinstance(exc, AnalysisNetworkError):
        return strings.ANALYSIS_NETWORK_ERROR.format(language, detail=str(exc))
    if isinstance(exc, HttpStatusError):
        message = strings.HTTP_ERROR.format(language, status_code=exc.status_code)
        if include_details and exc.body:
            message += "\n" + strings.HTTP_ERROR_DETAIL.format(language, body=exc.body)
        return message
    if isinstance(exc, DecodingError):
        return strings.DECODING_ERROR.text(language)
    return strings.ANALYSIS_ERROR.format(language, detail=str(exc))


def _web_status_message(status_code: int, language: Language) -> str:
    if status_code == 404:
        return strings.WEB_NOT_FOUND.text(language)
    if status_code in (401, 403):
        return strings.WEB_ACCESS_DENIED.text(language)
    return strings.WEB_HTTP_ERROR.format(language, status_code=status_code)
