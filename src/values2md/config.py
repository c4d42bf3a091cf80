"""Local configuration for values2md."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_VALUES_PATH = "charts/consul/values.yaml"
DEFAULT_REFERENCE_PATH = "website/content/docs/k8s/helm.mdx"
DEFAULT_REPO_PATH = "../consul"
DEFAULT_LOG_LEVEL = "INFO"

# Markers delimiting the generated block inside the reference document.
CODEGEN_START_MARKER = "<!-- codegen: start -->\n\n"
CODEGEN_END_MARKER = "\n  <!-- codegen: end -->"

TOC_PREFIX = "## Top-Level Stanzas\n\nUse these links to navigate to a particular top-level stanza.\n\n"
TOC_SUFFIX = "\n## All Values"

# Breadcrumb handed to the top-level keys; every anchor below the root starts with it.
ROOT_BREADCRUMB = "v"

VALUES2MD_VALUES_PATH = Path(os.getenv("VALUES2MD_VALUES_PATH", DEFAULT_VALUES_PATH))
VALUES2MD_REFERENCE_PATH = Path(os.getenv("VALUES2MD_REFERENCE_PATH", DEFAULT_REFERENCE_PATH))
VALUES2MD_REPO_PATH = Path(os.getenv("VALUES2MD_REPO_PATH", DEFAULT_REPO_PATH))
VALUES2MD_LOG_LEVEL = os.getenv("VALUES2MD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
