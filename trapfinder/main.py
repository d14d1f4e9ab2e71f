import argparse
import asyncio
import sys
from pathlib import Path

from trapfinder.analysis.factory import AnalysisClientFactory
from trapfinder.analysis.lifecycle import AnalysisLifecycle
from trapfinder.analysis.models import AnalysisResult
from trapfinder.config.settings import Settings
from trapfinder.i18n.language import Language
from trapfinder.logging.logger import Log
from trapfinder.ocr.factory import OcrEngineFactory
from trapfinder.pdf.factory import PdfRasterizerFactory
from trapfinder.plan.models import PlanTier
from trapfinder.plan.usage import UsageTracker
from trapfinder.scanner.reducer import PageReducer
from trapfinder.scanner.session import ScannerSession
from trapfinder.scanner.state import ActiveSheet, Error
from trapfinder.web.httpx_fetcher import HttpxWebFetcher

_IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"})


def build_session(settings: Settings, plan_service: UsageTracker | None = None) -> ScannerSession:
    """Build a ScannerSession with all required adapters."""
    reducer = PageReducer(
        OcrEngineFactory.create(settings),
        page_timeout_seconds=settings.page_timeout_seconds,
    )
    analysis = AnalysisLifecycle(
        client=AnalysisClientFactory.create(settings),
        temperature=settings.openai_temperature,
        resource_timeout_seconds=settings.openai_resource_timeout_seconds,
    )
    web_fetcher = HttpxWebFetcher(
        timeout_seconds=settings.web_fetch_timeout_seconds,
        user_agent=settings.web_user_agent,
    )
    return ScannerSession(
        reducer=reducer,
        pdf_rasterizer=PdfRasterizerFactory.create(settings),
        web_fetcher=web_fetcher,
        analysis=analysis,
        plan_service=plan_service or UsageTracker(PlanTier(settings.current_plan.lower())),
        language=Language.parse(settings.ui_language),
        include_error_details=settings.debug_diagnostics,
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="trapfinder",
        description="Scan a document and list the points that need attention.",
    )
    parser.add_argument(
        "sources",
        nargs="+",
        help="PDF file, page images, a text file, an http(s) URL, or '-' for stdin text",
    )
    return parser.parse_args(argv)


def _start_ingestion(session: ScannerSession, sources: list[str]) -> asyncio.Task[None] | None:
    if sources == ["-"]:
        session.submit_text(sys.stdin.read())
        return None
    first = sources[0]
    path = Path(first)
    if len(sources) == 1 and path.suffix.lower() == ".pdf":
        return session.scan_pdf(path.read_bytes())
    if all(Path(s).suffix.lower() in _IMAGE_SUFFIXES for s in sources):
        return session.scan_images([Path(s).read_bytes() for s in sources])
    if len(sources) == 1 and path.is_file():
        session.submit_text(path.read_text(encoding="utf-8"))
        return None
    return session.scan_url(first)


def _print_result(result: AnalysisResult) -> None:
    print(f"# {result.document_type}\n")
    print(result.summary)
    for finding in result.findings:
        print(f"\n[{finding.severity.value.upper()}] {finding.title}")
        if finding.quote:
            print(f"  > {finding.quote}")
        print(f"  {finding.description}")
        print(f"  -> {finding.suggestion}")


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Ingest the sources, analyze the text and print the findings."""
    session = build_session(settings)
    try:
        task = _start_ingestion(session, args.sources)
        if task is not None:
            await task
        if session.document is None:
            message = session.state.message if isinstance(session.state, Error) else ""
            print(message or "No text to analyze.", file=sys.stderr)
            return 1
        if isinstance(session.state, Error):
            print(session.state.message, file=sys.stderr)

        task = session.analyze()
        if task is None:
            if session.active_sheet is ActiveSheet.TOKEN_LIMIT_ALERT:
                print("Text exceeds the plan limit.", file=sys.stderr)
            return 1
        await task
    except asyncio.CancelledError:
        session.cancel()
        raise

    if isinstance(session.state, Error):
        print(session.state.message, file=sys.stderr)
        return 1
    if session.result is None:
        return 1
    _print_result(session.result)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point: load settings -> build dependencies -> run one scan."""
    settings = Settings()
    Log.configure(settings.log_level, diagnostics=settings.debug_diagnostics)
    args = _parse_args(argv)
    try:
        exit_code = asyncio.run(run(args, settings))
    except KeyboardInterrupt:
        Log.info("Cancelled by user")
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
