# src/faqaudit/constants.py
"""Centralized constants for the QA structure auditor.

Schema.org vocabulary values and the issue messages written into reports.
Issue messages are part of the report format consumed by the content team,
so they stay in French. For user-configurable thresholds, see config.py and
DetectionSettings.
"""

# =============================================================================
# Schema.org microdata vocabulary
# =============================================================================

QUESTION_TYPE = "https://schema.org/Question"
ANSWER_TYPE = "https://schema.org/Answer"

ITEMSCOPE = "itemscope"
ITEMPROP = "itemprop"
ITEMTYPE = "itemtype"

MAIN_ENTITY = "mainEntity"
ACCEPTED_ANSWER = "acceptedAnswer"
NAME_PROP = "name"
TEXT_PROP = "text"

# Marker recorded as answer element when the answer spans several elements
MIXED_CONTENT = "mixed-content"

# Appended to answer text cut for report compactness
ELLIPSIS = "..."

# =============================================================================
# Semantic detection
# =============================================================================

# Containers considered "block-level" when looking up a heading's enclosing block
BLOCK_LEVEL_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "dd", "details",
    "dialog", "div", "dl", "dt", "fieldset", "figure", "footer", "form",
    "header", "li", "main", "nav", "ol", "section", "table", "ul",
})

# =============================================================================
# Issue messages: Question
# =============================================================================

ISSUE_QUESTION_ITEMSCOPE = "Attribut itemscope manquant sur Question"
ISSUE_QUESTION_ITEMPROP = 'itemprop incorrect sur Question: {actual} au lieu de "mainEntity"'
ISSUE_QUESTION_ITEMTYPE = "itemtype incorrect sur Question: {actual}"
ISSUE_QUESTION_NAME = 'Élément avec itemprop="name" manquant pour le titre de la question'

# Baseline issues reported for every semantic block
ISSUE_SEMANTIC_ITEMPROP = 'Attribut itemprop="mainEntity" manquant sur Question'
ISSUE_SEMANTIC_ITEMTYPE = 'Attribut itemtype="https://schema.org/Question" manquant sur Question'

ISSUE_EMPTY_TITLE = "Titre de la question vide"
ISSUE_SHORT_TITLE = "Titre de la question trop court ({length} caractères)"

# =============================================================================
# Issue messages: Answer
# =============================================================================

ISSUE_ANSWER_MISSING = 'Aucune réponse avec itemtype="https://schema.org/Answer" trouvée'
ISSUE_ANSWER_ITEMSCOPE = "Attribut itemscope manquant sur Answer"
ISSUE_ANSWER_ITEMPROP = 'itemprop incorrect sur Answer: {actual} au lieu de "acceptedAnswer"'
ISSUE_ANSWER_ITEMTYPE = "itemtype incorrect sur Answer: {actual}"
ISSUE_ANSWER_TEXT = 'Élément avec itemprop="text" manquant pour le contenu de la réponse'

ISSUE_SEMANTIC_ANSWER_ITEMPROP = 'Attribut itemprop="acceptedAnswer" manquant sur Answer'
ISSUE_NO_ANSWER_CONTENT = "Aucun contenu de réponse trouvé après la question"
ISSUE_SHORT_ANSWER = "Contenu de la réponse trop court ({length} caractères)"

# Rendering of an attribute that is not present at all
ABSENT_VALUE = "absent"

# =============================================================================
# Reporting
# =============================================================================

DEFAULT_REPORT_PATH = "crawl-report.json"
