"""
Layout and style constants for the one-page invoice document.
Points on an A4 page, measured from the top-left corner.
"""

# Page geometry (A4, points)
PAGE_W, PAGE_H = 595, 842
MARGIN_X = 57
RIGHT_X = PAGE_W - MARGIN_X
CONTENT_W = PAGE_W - 2 * MARGIN_X

# Font sizes
BODY_SIZE = 10
COMPANY_NAME_SIZE = 24
TITLE_SIZE = 28
SECTION_TITLE_SIZE = 12
TOTAL_SIZE = 12

LINE_STEP = 17

# Company block (top-left)
COMPANY_Y = 57
COMPANY_LINES_Y = 79

# Title + metadata (top-right)
TITLE_Y = 57
META_Y = 85

# Bill To
BILL_TO_Y = 170
BILL_TO_LINES_Y = 193

# Line-item table
TABLE_Y = 312
TABLE_HEADER_HEIGHT = 28
TABLE_HEADER_BASELINE = 20
TABLE_FIRST_ROW_OFFSET = 43
TABLE_ROW_STEP = 20
COL_DESCRIPTION_X = MARGIN_X + 14
COL_QTY_X = PAGE_W - 255
COL_RATE_X = PAGE_W - 170
COL_AMOUNT_RIGHT = PAGE_W - 71

# Totals
TOTALS_GAP = 28
TOTALS_LABEL_X = PAGE_W - 198
TOTALS_ROW_STEP = 20

# Notes
NOTES_GAP = 57
NOTES_TEXT_OFFSET = 20
NOTES_LEADING = 12

# QR code next to the company block
QR_SIDE = 60
QR_Y = 150

# Colors (RGB components in 0-1 space encoded as strings for PDF ops)
COLORS = {
    "text": "0 0 0",
    "header_band": "0.39 0.39 1",
    "header_text": "1 1 1",
}


def color(name: str) -> str:
    return COLORS.get(name, "0 0 0")
