"""Constants for font stylesheet retrieval and override generation."""

GOOGLE_FONT_PROVIDER = "https://fonts.googleapis.com/css"

DEFAULT_SERIF_FONT = "Times New Roman"
DEFAULT_SANS_SERIF_FONT = "Arial"

# Modern browsers are served woff2, older ones woff/ttf. Both are requested
# from the provider so the stylesheet covers every format.
CHROME_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_5) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/83.0.4103.61 Safari/537.36"
)
IE_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Trident/7.0; rv:11.0) like Gecko"

SERIF_CATEGORY = "serif"

FONT_METRICS_FILENAME = "google-font-metrics.json"
