from __future__ import annotations

import pytest

SAMPLE_VALUES = """\
global:
  environment: production
  imagePullSecrets:
    - name: docker-registry

image:
  repository: nginx
  tag: ""

replicaCount: 3

service:
  enabled: true
  type: ClusterIP
  port: 80
  annotations: {}

ingress:
  enabled: false
  className: nginx
  hosts:
    - host: chart-example.local

redis:
  enabled: false
  host: redis.local
  port: 6379

podDisruptionBudget:
  enabled: true
  minAvailable: 1
  maxUnavailable: null

tolerations: []
"""

SAMPLE_OVERRIDES = """\
replicaCount: 5
ingress:
  enabled: true
extraLabels:
  team: platform
"""


@pytest.fixture
def chart_dir(tmp_path):
    (tmp_path / "values.yaml").write_text(SAMPLE_VALUES, encoding="utf-8")
    (tmp_path / "overrides.yaml").write_text(SAMPLE_OVERRIDES, encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch, tmp_path):
    for name in ("DEBUG", "CONTEXT", "OVERRIDES", "OUTPUT", "MAX_DEPTH"):
        monkeypatch.delenv(f"VALUES_SCHEMA_{name}", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
