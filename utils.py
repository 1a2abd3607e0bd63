import datetime
import io
import json
import logging
import zipfile
from html import escape
from pathlib import Path
from typing import Dict, List, Optional

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, HRFlowable

from contact_form import CONTACT_PATH, ERROR_MESSAGE, SUCCESS_MESSAGE
from content import Portfolio
from counters import COUNTER_DURATION_MS
from navigator import anchors_in
from scroll_progress import BACK_TO_TOP_THRESHOLD, HEADER_SPRING, STEP_MS, SpringConfig
from settings import Settings
from theme_store import THEME_KEY
from typed_text import DELETE_DELAY_MS, TYPE_DELAY_MS

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# RESUME PDF (ReportLab)
# ─────────────────────────────────────────────

def generate_resume_pdf(portfolio: Portfolio) -> bytes:
    p = portfolio.profile
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=letter,
        topMargin=0.55 * inch, bottomMargin=0.5 * inch,
        leftMargin=0.65 * inch, rightMargin=0.65 * inch
    )
    styles = getSampleStyleSheet()
    story = []

    # ── colour palette ──
    dark = HexColor('#0f172a')
    accent = HexColor('#0284c7')
    grey = HexColor('#475569')

    name_style = ParagraphStyle('Name', parent=styles['Normal'],
                                fontSize=24, textColor=dark, alignment=TA_CENTER,
                                fontName='Helvetica-Bold', spaceAfter=2, leading=28)
    contact_style = ParagraphStyle('Contact', parent=styles['Normal'],
                                   fontSize=9, textColor=grey, alignment=TA_CENTER,
                                   fontName='Helvetica', spaceAfter=4)
    section_style = ParagraphStyle('Section', parent=styles['Normal'],
                                   fontSize=11, textColor=accent,
                                   fontName='Helvetica-Bold', spaceBefore=10, spaceAfter=4)
    body_style = ParagraphStyle('Body', parent=styles['Normal'],
                                fontSize=9.5, textColor=dark,
                                fontName='Helvetica', spaceAfter=3, leading=13)
    bullet_style = ParagraphStyle('Bullet', parent=styles['Normal'],
                                  fontSize=9, textColor=grey,
                                  fontName='Helvetica', leftIndent=14, spaceAfter=2, leading=12)

    story.append(Paragraph(escape(p.name), name_style))
    story.append(Paragraph(' • '.join(escape(x) for x in (p.email, p.github, p.linkedin) if x), contact_style))
    story.append(HRFlowable(width="100%", color=accent, thickness=1.5, spaceAfter=6))

    story.append(Paragraph("PROFESSIONAL SUMMARY", section_style))
    story.append(Paragraph(escape(p.bio), body_style))

    story.append(Paragraph("SKILLS", section_style))
    for group in portfolio.skill_groups:
        story.append(Paragraph(f"<b>{escape(group.name)}:</b> {escape(', '.join(group.chips))}", body_style))

    story.append(Paragraph("EXPERIENCE", section_style))
    for exp in portfolio.experience:
        story.append(Paragraph(f"<b>{escape(exp.title)}</b> &nbsp;<i>{escape(exp.period)}</i>", body_style))
        for b in exp.bullets:
            story.append(Paragraph(f"• {escape(b)}", bullet_style))

    story.append(Paragraph("PROJECTS", section_style))
    for proj in portfolio.projects:
        story.append(Paragraph(f"<b>{escape(proj.title)}</b> ({escape(', '.join(proj.stack))})", body_style))
        story.append(Paragraph(escape(proj.desc), bullet_style))

    story.append(Paragraph("EDUCATION", section_style))
    for edu in portfolio.education:
        story.append(Paragraph(f"<b>{escape(edu.degree)}</b>", body_style))
        story.append(Paragraph(escape(edu.summary), bullet_style))

    if portfolio.certifications:
        story.append(Paragraph("CERTIFICATIONS", section_style))
        for cert in portfolio.certifications:
            story.append(Paragraph(f"• {escape(cert.name)}", body_style))

    story.append(Spacer(1, 6))
    doc.build(story)
    buf.seek(0)
    return buf.getvalue()


def load_resume(portfolio: Portfolio, path: Optional[Path]) -> bytes:
    """The static resume file when it exists, otherwise one rendered from the portfolio."""
    if path is not None and path.is_file():
        return path.read_bytes()
    logger.info("No resume at %s, rendering one from the portfolio", path)
    return generate_resume_pdf(portfolio)


# ─────────────────────────────────────────────
# BROWSER SCRIPTS
# ─────────────────────────────────────────────

def scroll_script(spring: SpringConfig = HEADER_SPRING, threshold: float = BACK_TO_TOP_THRESHOLD,
                  in_parent: bool = False) -> str:
    """
    Progress bar + back-to-top button driver, using the same spring
    integrator as `scroll_progress.Spring`. With `in_parent` the script runs
    inside a Streamlit component frame and drives the app's own scroll area.
    """
    cfg = json.dumps({
        'k': spring.stiffness, 'c': spring.damping, 'm': spring.mass,
        'restDelta': spring.rest_delta, 'restSpeed': spring.rest_speed,
        'step': STEP_MS, 'threshold': threshold, 'parent': in_parent,
    })
    return f"""
(function () {{
  const cfg = {cfg};
  const win = cfg.parent ? window.parent : window;
  const doc = win.document;
  if (win.__scrollProgress) win.__scrollProgress.teardown();

  const box = ['[data-testid="stMain"]', 'section.main']
    .map((s) => cfg.parent ? doc.querySelector(s) : null).find(Boolean);
  const scroller = box || doc.scrollingElement || doc.documentElement;
  const source = box || win;

  let bar = doc.getElementById('scroll-progress');
  if (!bar) {{
    bar = doc.createElement('div');
    bar.id = 'scroll-progress';
    bar.className = 'scroll-progress floating';
    doc.body.appendChild(bar);
  }}
  let btn = doc.getElementById('back-to-top');
  if (!btn) {{
    btn = doc.createElement('button');
    btn.id = 'back-to-top';
    btn.className = 'back-to-top';
    btn.setAttribute('aria-label', 'Back to top');
    btn.textContent = '\\u2303';
    doc.body.appendChild(btn);
  }}

  const s = {{ x: 0, v: 0, t: 0 }};
  let raf = null, last = null;
  const atRest = () => Math.abs(s.t - s.x) <= cfg.restDelta && Math.abs(s.v) <= cfg.restSpeed;
  function step(dt) {{
    let r = Math.max(0, dt);
    while (r > 0) {{
      const h = Math.min(cfg.step, r) / 1000;
      const f = -cfg.k * (s.x - s.t) - cfg.c * s.v;
      s.v += f / cfg.m * h;
      s.x += s.v * h;
      r -= cfg.step;
      if (atRest()) break;
    }}
    if (atRest()) {{ s.x = s.t; s.v = 0; }}
  }}
  function frame(now) {{
    step(now - (last === null ? now : last));
    last = now;
    const value = Math.min(1, Math.max(0, s.x));
    bar.style.transform = 'scaleX(' + value + ')';
    btn.classList.toggle('shown', value > cfg.threshold);
    if (atRest()) {{ raf = null; last = null; }} else {{ raf = win.requestAnimationFrame(frame); }}
  }}
  function onScroll() {{
    const range = scroller.scrollHeight - scroller.clientHeight;
    s.t = range > 0 ? Math.min(1, Math.max(0, scroller.scrollTop / range)) : 0;
    if (raf === null) raf = win.requestAnimationFrame(frame);
  }}
  function toTop() {{ scroller.scrollTo({{ top: 0, behavior: 'smooth' }}); }}

  source.addEventListener('scroll', onScroll, {{ passive: true }});
  btn.addEventListener('click', toTop);
  onScroll();
  win.__scrollProgress = {{
    teardown() {{
      source.removeEventListener('scroll', onScroll);
      btn.removeEventListener('click', toTop);
      if (raf !== null) win.cancelAnimationFrame(raf);
    }}
  }};
}})();
"""


def scroll_into_view_script(section_id: str) -> str:
    return (
        "<script>(function () {"
        f"const el = window.parent.document.getElementById({json.dumps(section_id)});"
        "if (el) el.scrollIntoView({behavior: 'smooth', block: 'start'});"
        "})();</script>"
    )


def _page_script(portfolio: Portfolio, backend_url: str) -> str:
    cfg = json.dumps({
        'themeKey': THEME_KEY,
        'phrases': list(portfolio.phrases),
        'typeDelay': TYPE_DELAY_MS,
        'deleteDelay': DELETE_DELAY_MS,
        'counterDuration': COUNTER_DURATION_MS,
        'contactUrl': backend_url.rstrip('/') + CONTACT_PATH,
        'successMessage': SUCCESS_MESSAGE,
        'errorMessage': ERROR_MESSAGE,
    })
    return f"""
(function () {{
  const cfg = {cfg};
  const root = document.documentElement;

  // theme
  const saved = localStorage.getItem(cfg.themeKey);
  let dark = saved ? saved === 'dark'
    : !!(window.matchMedia && window.matchMedia('(prefers-color-scheme: dark)').matches);
  function applyTheme() {{
    root.classList.toggle('dark', dark);
    localStorage.setItem(cfg.themeKey, dark ? 'dark' : 'light');
    document.getElementById('theme-toggle').textContent = dark ? '\\u{{1F31E}}' : '\\u{{1F319}}';
  }}
  document.getElementById('theme-toggle').addEventListener('click', () => {{ dark = !dark; applyTheme(); }});
  applyTheme();

  // navigation
  document.querySelectorAll('[data-target]').forEach((el) => {{
    el.addEventListener('click', (e) => {{
      e.preventDefault();
      const target = document.getElementById(el.dataset.target);
      if (target) target.scrollIntoView({{ behavior: 'smooth', block: 'start' }});
    }});
  }});

  // typed text
  const typed = document.getElementById('typed');
  let index = 0, sub = '', deleting = false;
  function tick() {{
    const current = cfg.phrases[index % cfg.phrases.length];
    if (!deleting) {{
      sub = current.slice(0, sub.length + 1);
      if (sub.length === current.length) deleting = true;
    }} else {{
      sub = current.slice(0, Math.max(0, sub.length - 1));
      if (sub.length === 0) {{ deleting = false; index = (index + 1) % cfg.phrases.length; }}
    }}
    typed.textContent = sub;
    setTimeout(tick, deleting ? cfg.deleteDelay : cfg.typeDelay);
  }}
  setTimeout(tick, cfg.typeDelay);

  // counters
  document.querySelectorAll('[data-count]').forEach((el) => {{
    const end = Number(el.dataset.count), suffix = el.dataset.suffix || '';
    const startTime = performance.now();
    function frame(now) {{
      const p = Math.min(1, (now - startTime) / cfg.counterDuration);
      el.textContent = Math.round(end * (1 - Math.pow(1 - p, 3))) + suffix;
      if (p < 1) requestAnimationFrame(frame);
    }}
    requestAnimationFrame(frame);
  }});

  // project details
  document.querySelectorAll('.details').forEach((b) => b.addEventListener('click', () => alert('Details coming soon!')));

  // contact
  const form = document.getElementById('contact-form');
  const status = document.getElementById('contact-status');
  const send = form.querySelector('button[type=submit]');
  form.addEventListener('submit', async (e) => {{
    e.preventDefault();
    send.disabled = true; send.textContent = 'Sending\\u2026';
    status.textContent = ''; status.className = 'status';
    const payload = Object.fromEntries(new FormData(form).entries());
    try {{
      const res = await fetch(cfg.contactUrl, {{
        method: 'POST',
        headers: {{ 'Content-Type': 'application/json' }},
        body: JSON.stringify(payload)
      }});
      if (!res.ok) throw new Error('Failed to send');
      status.textContent = cfg.successMessage; status.className = 'status ok';
      form.reset();
    }} catch (err) {{
      status.textContent = cfg.errorMessage; status.className = 'status error';
    }} finally {{
      send.disabled = false; send.textContent = 'Send Message';
    }}
  }});
}})();
"""


# ─────────────────────────────────────────────
# SITE HTML + ZIP
# ─────────────────────────────────────────────

SITE_CSS = """
    *, *::before, *::after { box-sizing:border-box; margin:0; padding:0; }
    :root {
      --bg:#ffffff; --surface:rgba(255,255,255,.7); --border:#e2e8f0;
      --text:#1e293b; --heading:#0f172a; --muted:#475569;
      --grad:linear-gradient(90deg,#0ea5e9,#6366f1,#22d3ee);
      --btn:linear-gradient(90deg,#0284c7,#06b6d4);
    }
    :root.dark {
      --bg:#020617; --surface:rgba(15,23,42,.6); --border:#1e293b;
      --text:#e2e8f0; --heading:#ffffff; --muted:#cbd5e1;
    }
    html { scroll-behavior:smooth; }
    body {
      font-family:'Inter',system-ui,sans-serif; background:var(--bg); color:var(--text);
      line-height:1.6; transition:background .3s,color .3s;
      background-image:
        radial-gradient(1000px 800px at 10% -10%, rgba(56,189,248,.15), transparent),
        radial-gradient(800px 600px at 90% 10%, rgba(99,102,241,.14), transparent);
    }
    a { color:inherit; text-decoration:none; }
    .container { max-width:1100px; margin:0 auto; padding:0 1.5rem; }

    /* ─── header ─── */
    header { position:fixed; top:0; left:0; right:0; z-index:50;
             backdrop-filter:blur(12px); background:var(--surface); border-bottom:1px solid var(--border); }
    .nav-inner { height:4rem; display:flex; align-items:center; justify-content:space-between; }
    .brand { font-weight:600; font-size:1.1rem; background:var(--grad);
             -webkit-background-clip:text; -webkit-text-fill-color:transparent; border:0; cursor:pointer; }
    nav button { background:none; border:0; color:var(--muted); margin-left:1.4rem; font-size:.9rem; cursor:pointer; }
    nav button:hover { color:var(--heading); }
    .actions { display:flex; gap:.5rem; align-items:center; }
    .pill { display:inline-flex; gap:.4rem; align-items:center; border-radius:999px; padding:.55rem 1rem;
            font-size:.85rem; font-weight:500; border:1px solid var(--border); background:none;
            color:var(--text); cursor:pointer; }
    .pill.primary { background:var(--btn); color:#fff; border:0; }
    .scroll-progress { height:2px; background:var(--grad); transform-origin:0 50%; transform:scaleX(0); }
    .scroll-progress.floating { position:fixed; top:0; left:0; right:0; z-index:1000; }

    /* ─── sections ─── */
    section { padding:6rem 0; scroll-margin-top:6rem; }
    h2 { font-size:1.8rem; font-weight:600; color:var(--heading); }
    .subtitle { color:var(--muted); margin:.4rem 0 2.5rem; }
    .card { border:1px solid var(--border); background:var(--surface); border-radius:1rem; padding:1.4rem;
            box-shadow:0 1px 2px rgba(0,0,0,.05); }
    .grid-2 { display:grid; grid-template-columns:1fr 1fr; gap:1.5rem; }
    .chip { display:inline-block; border:1px solid var(--border); background:var(--surface); border-radius:999px;
            padding:.2rem .75rem; font-size:.75rem; font-weight:500; margin:0 .3rem .3rem 0; }

    /* ─── hero ─── */
    #hero { padding-top:9rem; }
    #hero h1 { font-size:clamp(2rem,5vw,3rem); font-weight:600; color:var(--heading); }
    .typed { font-size:1.4rem; background:var(--grad); -webkit-background-clip:text;
             -webkit-text-fill-color:transparent; min-height:2.2rem; }
    .caret { display:inline-block; width:2px; height:1.4rem; background:#22d3ee; vertical-align:middle;
             animation:blink 1s infinite; }
    @keyframes blink { 50% { opacity:0; } }
    .counter .num { font-size:1.6rem; font-weight:600; color:var(--heading); }
    .counter .label { font-size:.85rem; color:var(--muted); }

    /* ─── skills ─── */
    .group h3 { font-size:.8rem; text-transform:uppercase; letter-spacing:.1em; color:var(--muted); margin-bottom:.7rem; }
    .bar-row { display:flex; justify-content:space-between; font-size:.85rem; margin-top:.8rem; }
    .bar { height:.5rem; border-radius:999px; background:rgba(148,163,184,.3); overflow:hidden; }
    .bar > div { height:100%; background:var(--grad); animation:grow .8s ease-out both; }
    @keyframes grow { from { width:0; } }

    /* ─── contact ─── */
    form label { font-size:.85rem; color:var(--muted); }
    form input, form textarea { width:100%; margin-top:.3rem; border-radius:.75rem; border:1px solid var(--border);
            background:var(--surface); color:var(--text); padding:.55rem .8rem; font:inherit; }
    .status.ok { color:#059669; } .status.error { color:#f43f5e; }
    blockquote { border-left:4px solid #22d3ee; padding-left:1rem; font-style:italic; }
    footer { padding:2.5rem 0; text-align:center; font-size:.85rem; color:#64748b; }

    .back-to-top { position:fixed; bottom:1.5rem; right:1.5rem; border:0; border-radius:999px; padding:.8rem 1rem;
                   background:var(--btn); color:#fff; cursor:pointer; opacity:0; transform:translateY(20px);
                   transition:opacity .3s, transform .3s; pointer-events:none; }
    .back-to-top.shown { opacity:1; transform:none; pointer-events:auto; }

    @media (max-width:760px) { nav { display:none; } .grid-2 { grid-template-columns:1fr; } }
"""


def _section(section_id: str, title: str, subtitle: str, body: str) -> str:
    sub = f'\n      <p class="subtitle">{escape(subtitle)}</p>' if subtitle else ''
    return f"""
<section id="{section_id}">
  <div class="container">
    <h2>{escape(title)}</h2>{sub}
    {body}
  </div>
</section>"""


def _chips(items) -> str:
    return ''.join(f'<span class="chip">{escape(s)}</span>' for s in items)


def _bullets(items) -> str:
    return ''.join(f'<li>• {escape(b)}</li>' for b in items)


def build_site_html(portfolio: Portfolio, settings: Optional[Settings] = None,
                    today: Optional[datetime.date] = None) -> str:
    settings = settings or Settings()
    today = today or datetime.date.today()
    p = portfolio.profile
    resume = escape(portfolio.resume_file)
    titles: Dict[str, str] = {n.id: n.label for n in portfolio.nav}

    nav_buttons = "\n        ".join(
        f'<button data-target="{n.id}">{escape(n.label)}</button>' for n in portfolio.nav
    )
    counters = "\n".join(
        f'<div class="card counter"><div class="num" data-count="{c.value}" data-suffix="{escape(c.suffix)}">0{escape(c.suffix)}</div>'
        f'<div class="label">{escape(c.label)}</div></div>'
        for c in portfolio.counters
    )
    quick = "".join(f'<div>{escape(k)}</div><div style="text-align:right">{escape(v)}</div>' for k, v in p.quick_profile)
    about = "".join(f"<p>{escape(par)}</p>" for par in p.about)
    groups = "\n".join(
        f'<div class="group"><h3>{escape(g.name)}</h3>{_chips(g.chips)}'
        + ''.join(
            f'<div class="bar-row"><span>{escape(b.name)}</span><span>{b.level}%</span></div>'
            f'<div class="bar"><div style="width:{b.level}%"></div></div>'
            for b in g.bars
        ) + '</div>'
        for g in portfolio.skill_groups
    )
    projects = "\n".join(
        f'<div class="card"><h3>{escape(pr.title)}</h3><p class="subtitle" style="margin:.3rem 0 .8rem">{escape(pr.desc)}</p>'
        f'{_chips(pr.stack)}<div style="margin-top:.8rem">'
        f'<a class="pill" href="{escape(pr.github)}" target="_blank" rel="noreferrer">View on GitHub ↗</a> '
        f'<button class="pill details">View Details</button></div></div>'
        for pr in portfolio.projects
    )
    experience = "\n".join(
        f'<div class="card"><h3>{escape(e.title)}</h3><div class="subtitle" style="margin:0">{escape(e.period)}</div>'
        f'<ul style="list-style:none;margin-top:1rem">{_bullets(e.bullets)}</ul></div>'
        for e in portfolio.experience
    )
    education = "\n".join(
        f'<div class="card"><h3>{escape(ed.degree)}</h3><p>{escape(ed.summary)}</p></div>'
        for ed in portfolio.education
    )
    certs = "\n".join(
        f'<div class="card"><div>{escape(c.name)}</div>'
        + (f'<div class="subtitle" style="margin:0;font-size:.75rem">{escape(c.note)}</div>' if c.note else '')
        + '</div>'
        for c in portfolio.certifications
    )
    links = "\n".join(
        f'<a href="{escape(l.url)}" target="_blank" rel="noreferrer">{escape(l.label)}</a><br/>'
        for l in portfolio.contact_links
    )

    sections = [
        _section('about', titles.get('about', 'About'), portfolio.subtitle('about'), f"""
    <div class="grid-2">
      <div>{about}<blockquote>“{escape(p.quote)}”</blockquote></div>
      <div class="card"><div class="subtitle" style="margin:0">Quick Profile</div>
        <div class="grid-2" style="gap:.6rem;margin-top:.8rem;font-size:.9rem">{quick}</div></div>
    </div>"""),
        _section('skills', titles.get('skills', 'Skills'), portfolio.subtitle('skills'),
                 f'<div class="grid-2">{groups}</div>'),
        _section('projects', titles.get('projects', 'Projects'), portfolio.subtitle('projects'),
                 f'<div class="grid-2">{projects}</div>'),
        _section('experience', titles.get('experience', 'Experience'), portfolio.subtitle('experience'), experience),
        _section('education', titles.get('education', 'Education'), portfolio.subtitle('education'), education),
        _section('certifications', titles.get('certifications', 'Certifications'),
                 portfolio.subtitle('certifications'), f'<div class="grid-2">{certs}</div>'),
        _section('contact', titles.get('contact', 'Contact'), portfolio.subtitle('contact'), f"""
    <div class="grid-2">
      <form id="contact-form">
        <div class="grid-2" style="gap:1rem">
          <div><label>Name</label><input name="name" required placeholder="Your name"/></div>
          <div><label>Email</label><input type="email" name="email" required placeholder="you@example.com"/></div>
        </div>
        <div style="margin-top:1rem"><label>Message</label>
          <textarea name="message" required rows="5" placeholder="How can I help?"></textarea></div>
        <div id="contact-status" class="status" style="margin:.6rem 0"></div>
        <button type="submit" class="pill primary">Send Message</button>
      </form>
      <div>{links}</div>
    </div>"""),
    ]

    html = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
  <title>{escape(p.name)} — Portfolio</title>
  <link href="https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap" rel="stylesheet"/>
  <style>{SITE_CSS}  </style>
</head>
<body>

<header>
  <div class="container nav-inner">
    <button class="brand" data-target="hero">{escape(p.name)}</button>
    <nav>
        {nav_buttons}
    </nav>
    <div class="actions">
      <a class="pill primary" href="{resume}" download>⬇ Resume</a>
      <button id="theme-toggle" class="pill" aria-label="Toggle theme">🌙</button>
    </div>
  </div>
  <div id="scroll-progress" class="scroll-progress"></div>
</header>

<section id="hero">
  <div class="container grid-2" style="align-items:center">
    <div>
      <h1>{escape(p.name)}</h1>
      <div style="margin-top:.8rem"><span id="typed" class="typed"></span><span class="caret"></span></div>
      <p class="subtitle" style="margin-top:1.5rem">{escape(p.bio)}</p>
      <div class="actions" style="flex-wrap:wrap">
        <a class="pill primary" href="{resume}" download>⬇ Download Resume</a>
        <a class="pill" href="#contact" data-target="contact">Let’s Connect</a>
        <a class="pill" href="{escape(p.github)}" target="_blank" rel="noreferrer">GitHub</a>
        <a class="pill" href="{escape(p.linkedin)}" target="_blank" rel="noreferrer">LinkedIn</a>
      </div>
    </div>
    <div class="grid-2">
{counters}
    </div>
  </div>
</section>
{''.join(sections)}

<footer>© {today.year} {escape(p.name)} — Crafted with care.</footer>
<button id="back-to-top" class="back-to-top" aria-label="Back to top">⌃</button>

<script>{_page_script(portfolio, settings.backend_url)}</script>
<script>{scroll_script()}</script>
</body>
</html>"""

    missing = missing_anchors(html, portfolio.section_ids)
    if missing:
        logger.warning("Navigation targets missing from page: %s", ", ".join(missing))
    return html


def missing_anchors(html: str, section_ids: List[str]) -> List[str]:
    present = set(anchors_in(html))
    return [s for s in section_ids if s not in present]


def export_site_zip(portfolio: Portfolio, settings: Optional[Settings] = None,
                    resume: Optional[bytes] = None, today: Optional[datetime.date] = None) -> bytes:
    settings = settings or Settings()
    today = today or datetime.date.today()
    html = build_site_html(portfolio, settings, today)
    if resume is None:
        resume = load_resume(portfolio, settings.resolved_resume_path)
    name = portfolio.profile.name

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w', zipfile.ZIP_DEFLATED) as zf:
        zf.writestr('index.html', html)
        zf.writestr(portfolio.resume_file, resume)
        zf.writestr('README.md',
            f"# {name} — Portfolio\n\n"
            f"Exported on {today.isoformat()}.\n\n"
            f"The contact form posts to `{settings.backend_url or '(same origin)'}{CONTACT_PATH}`.\n\n"
            f"## Deploy (all free)\n"
            f"1. **GitHub Pages** — push to a repo, enable Pages\n"
            f"2. **Netlify** — drag & drop the folder\n"
            f"3. **Vercel** — connect your GitHub repo\n"
        )
    buf.seek(0)
    return buf.getvalue()
