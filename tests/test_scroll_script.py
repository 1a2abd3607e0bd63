import json
import re

from scroll_progress import HEADER_SPRING, STEP_MS, SpringConfig
from utils import scroll_script


def _step_body(script):
    return script.split("function step(dt) {", 1)[1].split("function frame", 1)[0]


def _statements(body):
    return [line.strip() for line in body.splitlines() if line.strip()]


def test_page_integrator_matches_python_spring():
    # Spring.step: clamp dt, 1 ms sub-steps, force, velocity then position,
    # stop once at rest, then snap to target.
    lines = _statements(_step_body(scroll_script()))
    expected = [
        "let r = Math.max(0, dt);",
        "while (r > 0) {",
        "const h = Math.min(cfg.step, r) / 1000;",
        "const f = -cfg.k * (s.x - s.t) - cfg.c * s.v;",
        "s.v += f / cfg.m * h;",
        "s.x += s.v * h;",
        "r -= cfg.step;",
        "if (atRest()) break;",
        "}",
        "if (atRest()) { s.x = s.t; s.v = 0; }",
        "}",
    ]
    assert lines == expected


def test_page_rest_check_matches_python_spring():
    script = scroll_script()
    assert ("Math.abs(s.t - s.x) <= cfg.restDelta && Math.abs(s.v) <= cfg.restSpeed"
            in script)


def test_page_config_mirrors_spring_config():
    spring = SpringConfig(stiffness=50, damping=7, mass=1.5, rest_delta=0.01, rest_speed=0.02)
    script = scroll_script(spring, 0.3, in_parent=True)
    cfg = json.loads(re.search(r"const cfg = (\{.*?\});", script).group(1))
    assert cfg == {
        "k": 50, "c": 7, "m": 1.5, "restDelta": 0.01, "restSpeed": 0.02,
        "step": STEP_MS, "threshold": 0.3, "parent": True,
    }


def test_default_script_uses_header_spring():
    cfg = json.loads(re.search(r"const cfg = (\{.*?\});", scroll_script()).group(1))
    assert (cfg["k"], cfg["c"], cfg["m"]) == (
        HEADER_SPRING.stiffness, HEADER_SPRING.damping, HEADER_SPRING.mass)
