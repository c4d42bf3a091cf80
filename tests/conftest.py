"""Test setup for values2md."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SAMPLE_VALUES = """\
# Holds values that affect multiple components of the chart.
global:
  # The main enabled/disabled setting.
  enabled: true

  # The prefix used for all resources.
  name: null

  # Ports exposed by every agent.
  ports: [8500, 8501]

  tls:
    # Enable TLS for the cluster.
    enabled: false
    serverAdditionalDNSSANs: []

# Settings for the server agents.
server:
  # Extra volumes mounted into the server pods.
  # @type: array<map>
  # @recurse: false
  extraVolumes:
    - type: secret
      name: consul-certs

  gateways:
    - name: ingress-gateway
      port: 8080

# Top-level scalar.
fullnameOverride: ""
"""


@pytest.fixture
def sample_values() -> str:
    """A small annotated values document."""
    return SAMPLE_VALUES


@pytest.fixture
def reference_doc() -> str:
    """A reference document with the codegen markers in place."""
    return (
        "---\ntitle: Helm Chart Reference\n---\n\n"
        "<!-- codegen: start -->\n\n"
        "stale generated content\n"
        "  <!-- codegen: end -->\n\n"
        "## Footer\n"
    )
