"""User-facing strings used by the scan and analysis pipeline."""

from trapfinder.i18n.language import LocalizedString

ANALYZING = LocalizedString(
    ja="AIが内容をチェック中...",
    en="AI is checking the content...",
)
PHASE_READING = LocalizedString(ja="文書を読み込んでいます...", en="Reading document...")
PHASE_DETECTING = LocalizedString(
    ja="重要なポイントを検出中...",
    en="Detecting important points...",
)
PHASE_CHECKING = LocalizedString(ja="詳細を確認中...", en="Checking details...")
PHASE_ORGANIZING = LocalizedString(ja="項目を整理中...", en="Organizing items...")
PHASE_FINALIZING = LocalizedString(ja="最終チェック中...", en="Final check...")

BLANK_PAGE = LocalizedString(ja="空白ページ", en="blank page")
PAGE_TIMEOUT = LocalizedString(
    ja="OCR処理がタイムアウトしました。ページが大きすぎる可能性があります。",
    en="OCR timed out. The page may be too large.",
)

SCAN_TRUNCATED = LocalizedString(
    ja="読み取ったテキストが上限（{limit}文字）を超えたため、先頭{limit}文字のみ保持しました。",
    en="Scanned text exceeds the limit ({limit} chars). Kept only the first {limit} characters.",
)
FETCH_TRUNCATED = LocalizedString(
    ja="読み取ったテキストが上限（{limit}文字）を超えたため、先頭{limit}文字のみ保持しました。",
    en="The fetched text exceeds the limit ({limit} chars). Kept only the first {limit} characters.",
)

TEXT_RECOGNITION_ERROR = LocalizedString(
    ja="文字を読み取れませんでした",
    en="Failed to recognize text",
)
PDF_LOAD_ERROR = LocalizedString(
    ja="PDFファイルを読み込めませんでした。ファイルが破損しているか、形式が正しくない可能性があります。",
    en="Could not load the PDF file. The file may be corrupt or in an unsupported format.",
)
PDF_NO_PAGES = LocalizedString(ja="PDFにページがありません。", en="The PDF has no pages.")
FILE_LOAD_ERROR = LocalizedString(ja="ファイル読み込みエラー: {detail}", en="File load error: {detail}")

INVALID_URL = LocalizedString(
    ja="http:// または https:// で始まる正しいURLを入力してください。",
    en="Please enter a valid URL starting with http:// or https://",
)
WEB_PAGE_LOAD_ERROR = LocalizedString(
    ja="ページからテキストを読み取れませんでした。ページが空か、アクセスできない可能性があります。",
    en="Failed to read text from the page. The page may be empty or inaccessible.",
)
WEB_NETWORK_ERROR = LocalizedString(
    ja="ネットワークエラー: インターネット接続を確認してください。",
    en="Network error: please check your internet connection.",
)
WEB_TIMEOUT = LocalizedString(
    ja="ページの応答がタイムアウトしました。もう一度お試しください。",
    en="The page took too long to respond. Please try again.",
)
WEB_NOT_FOUND = LocalizedString(
    ja="ページが見つかりませんでした（404エラー）。URLを確認してください。",
    en="Page not found (404). Please check the URL.",
)
WEB_ACCESS_DENIED = LocalizedString(
    ja="ページへのアクセスが拒否されました。認証が必要な可能性があります。",
    en="Access to the page was denied. Authentication may be required.",
)
WEB_HTTP_ERROR = LocalizedString(
    ja="HTTPエラー ({status_code}): ページにアクセスできませんでした",
    en="HTTP error ({status_code}): could not access the page",
)
WEB_PARSE_ERROR = LocalizedString(
    ja="ページの内容を解析できませんでした",
    en="Could not parse the page content",
)

MISSING_API_KEY = LocalizedString(
    ja="OpenAI APIキーが設定されていません。環境変数OPENAI_API_KEYを設定してください。",
    en="The OpenAI API key is not configured. Set the OPENAI_API_KEY environment variable.",
)
ANALYSIS_TIMEOUT = LocalizedString(
    ja="解析がタイムアウトしました。文書が長い可能性があります。もう一度お試しください。",
    en="The analysis timed out. The document may be long; please try again.",
)
ANALYSIS_NETWORK_ERROR = LocalizedString(
    ja="ネットワークエラー: {detail}",
    en="Network error: {detail}",
)
HTTP_ERROR = LocalizedString(ja="HTTPエラー: {status_code}", en="HTTP Error: {status_code}")
HTTP_ERROR_DETAIL = LocalizedString(ja="詳細: {body}", en="Details: {body}")
DECODING_ERROR = LocalizedString(
    ja="レスポンスの解析に失敗しました。",
    en="Failed to parse the response.",
)
ANALYSIS_ERROR = LocalizedString(ja="解析エラー: {detail}", en="Analysis Error: {detail}")

DEFAULT_FINDING_TITLE = LocalizedString(ja="検出されたリスク", en="Detected risk")

USER_PROMPT_PREFIX = LocalizedString(
    ja="以下の文書を解析してください。",
    en="Please analyze the following document.",
)
