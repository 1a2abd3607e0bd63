import datetime
import logging
import time
from html import escape
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components

from contact_form import ContactFormController, FIELDS, SubmissionResult, SUCCESS_MESSAGE
from content import PORTFOLIO
from counters import AnimatedCounter
from navigator import SectionNavigator
from scheduling import CooperativeLoop
from settings import load_settings
from theme_store import JsonFileStore, ThemePreference, ThemeStore
from typed_text import DELETE_DELAY_MS, TypedText
from utils import export_site_zip, load_resume, scroll_into_view_script, scroll_script

logger = logging.getLogger(__name__)

P = PORTFOLIO.profile
FRAME_INTERVAL_S = 0.05

# ─────────────────────────────────────────────
# PAGE CONFIG
# ─────────────────────────────────────────────
st.set_page_config(
    page_title=f"{P.name} — Portfolio",
    page_icon="☁️",
    layout="wide",
    initial_sidebar_state="collapsed",
    menu_items={
        'About': f'{P.name} — {P.tagline}',
    }
)

# ─────────────────────────────────────────────
# GLOBAL CSS
# ─────────────────────────────────────────────
THEME_VARS = {
    ThemePreference.LIGHT: """
      --pf-bg:#ffffff; --pf-surface:rgba(255,255,255,.7); --pf-border:#e2e8f0;
      --pf-text:#1e293b; --pf-heading:#0f172a; --pf-muted:#475569;""",
    ThemePreference.DARK: """
      --pf-bg:#020617; --pf-surface:rgba(15,23,42,.6); --pf-border:#1e293b;
      --pf-text:#e2e8f0; --pf-heading:#ffffff; --pf-muted:#cbd5e1;""",
}

st.markdown("""
<style>
  #MainMenu, footer { display:none !important; }

  .pf-grad { background:linear-gradient(90deg,#0ea5e9,#6366f1,#22d3ee);
             -webkit-background-clip:text; -webkit-text-fill-color:transparent; }
  .pf-hero h1 { font-size:2.8rem; font-weight:600; color:var(--pf-heading); margin:0; }
  .pf-typed { font-size:1.4rem; min-height:2.2rem; }
  .pf-caret { display:inline-block; width:2px; height:1.4rem; background:#22d3ee;
              vertical-align:middle; margin-left:2px; animation:pf-blink 1s infinite; }
  @keyframes pf-blink { 50% { opacity:0; } }

  .pf-card { border:1px solid var(--pf-border); background:var(--pf-surface);
             border-radius:1rem; padding:1.2rem 1.3rem; margin-bottom:1rem; }
  .pf-card h3 { color:var(--pf-heading); font-size:1.05rem; margin:0 0 .3rem; }
  .pf-counter .num { font-size:1.6rem; font-weight:600; color:var(--pf-heading); }
  .pf-counter .lbl { font-size:.85rem; color:var(--pf-muted); }
  .pf-sub { color:var(--pf-muted); font-size:.92rem; }

  .pf-chip { display:inline-block; border:1px solid var(--pf-border); background:var(--pf-surface);
             border-radius:999px; padding:.15rem .7rem; font-size:.75rem; margin:0 .3rem .3rem 0; }
  .pf-bar-row { display:flex; justify-content:space-between; font-size:.85rem; margin-top:.6rem; }
  .pf-bar { height:.5rem; border-radius:999px; background:rgba(148,163,184,.3); overflow:hidden; }
  .pf-bar > div { height:100%; background:linear-gradient(90deg,#0ea5e9,#6366f1,#22d3ee);
                  animation:pf-grow .8s ease-out both; }
  @keyframes pf-grow { from { width:0; } }
  .pf-quote { border-left:4px solid #22d3ee; padding-left:1rem; font-style:italic; }
  .pf-footer { text-align:center; color:#64748b; font-size:.85rem; padding:2rem 0; }

  /* ── scroll progress + back to top (driven by scroll_script) ── */
  .scroll-progress { height:2px; background:linear-gradient(90deg,#0ea5e9,#6366f1,#22d3ee);
                     transform-origin:0 50%; transform:scaleX(0); }
  .scroll-progress.floating { position:fixed; top:0; left:0; right:0; z-index:1000001; }
  .back-to-top { position:fixed; bottom:1.5rem; right:1.5rem; z-index:1000001; border:0;
                 border-radius:999px; padding:.7rem 1rem; color:#fff; cursor:pointer;
                 background:linear-gradient(90deg,#0284c7,#06b6d4);
                 opacity:0; transform:translateY(20px); pointer-events:none;
                 transition:opacity .3s, transform .3s; }
  .back-to-top.shown { opacity:1; transform:none; pointer-events:auto; }
</style>
""", unsafe_allow_html=True)


# ─────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────

@st.cache_resource
def _settings():
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


@st.cache_data
def _resume_bytes(path: str) -> bytes:
    return load_resume(PORTFOLIO, Path(path))


@st.cache_data
def _site_zip(backend_url: str, resume: bytes, day: str) -> bytes:
    return export_site_zip(PORTFOLIO, _settings(), resume=resume, today=datetime.date.fromisoformat(day))


def _now_ms() -> float:
    return time.monotonic() * 1000


def _system_prefers_dark():
    base = st.get_option("theme.base")
    return None if base is None else base == "dark"


def _apply_theme(pref: ThemePreference) -> None:
    st.session_state['theme'] = pref.value


def _theme() -> ThemeStore:
    if 'theme_store' not in st.session_state:
        store = JsonFileStore(_settings().resolved_theme_store_path)
        st.session_state['theme_store'] = ThemeStore(store, _apply_theme, _system_prefers_dark)
    return st.session_state['theme_store']


def _start_animations() -> None:
    """(Re)create the hero animations; previous ones are disposed first."""
    logger.debug("Starting hero animations")
    for anim in st.session_state.get('animations', []):
        anim.dispose()
    loop = st.session_state.setdefault('loop', CooperativeLoop(start=_now_ms()))
    typed = TypedText(PORTFOLIO.phrases, loop)
    counters = [AnimatedCounter(c.value, loop, suffix=c.suffix) for c in PORTFOLIO.counters]
    typed.start()
    for c in counters:
        c.start()
    st.session_state['typed'] = typed
    st.session_state['counters'] = counters
    st.session_state['animations'] = [typed, *counters]


def _contact() -> ContactFormController:
    if 'contact' not in st.session_state:
        s = _settings()
        st.session_state['contact'] = ContactFormController(s.backend_url, timeout=s.contact_timeout)
    return st.session_state['contact']


def _request_scroll(section_id: str) -> None:
    st.session_state['scroll_target'] = section_id


def _render_scroll(section_id: str) -> None:
    components.html(scroll_into_view_script(section_id), height=0)


def _submit_contact() -> None:
    controller = _contact()
    fields = {f: st.session_state.get(f'contact_{f}', '') for f in FIELDS}
    missing = controller.missing_fields(fields)
    st.session_state['contact_missing'] = missing
    if missing:
        return
    controller.submit(fields)
    if controller.result is SubmissionResult.SUCCESS:
        for f in FIELDS:
            st.session_state[f'contact_{f}'] = controller.fields[f]


def _anchor(section_id: str) -> None:
    st.markdown(f'<div id="{section_id}"></div>', unsafe_allow_html=True)


def _heading(section_id: str, title: str) -> None:
    _anchor(section_id)
    st.markdown(f"## {title}")
    sub = PORTFOLIO.subtitle(section_id)
    if sub:
        st.markdown(f'<p class="pf-sub">{escape(sub)}</p>', unsafe_allow_html=True)


def _chips(items) -> str:
    return ''.join(f'<span class="pf-chip">{escape(s)}</span>' for s in items)


# ─────────────────────────────────────────────
# HERO (animated)
# ─────────────────────────────────────────────

# Both fragments pump the same loop; whichever reruns first fires what is due.

@st.fragment(run_every=DELETE_DELAY_MS / 1000)
def typed_text():
    st.session_state['loop'].pump(_now_ms())
    typed = st.session_state['typed']
    st.markdown(f'<div class="pf-typed"><span class="pf-grad">{escape(typed.text)}</span>'
                f'<span class="pf-caret"></span></div>', unsafe_allow_html=True)


@st.fragment(run_every=FRAME_INTERVAL_S)
def counter_cards():
    st.session_state['loop'].pump(_now_ms())
    cols = st.columns(2)
    for i, (counter, meta) in enumerate(zip(st.session_state['counters'], PORTFOLIO.counters)):
        cols[i % 2].markdown(
            f'<div class="pf-card pf-counter"><div class="num">{counter.display}</div>'
            f'<div class="lbl">{escape(meta.label)}</div></div>', unsafe_allow_html=True)


# ─────────────────────────────────────────────
# MAIN
# ─────────────────────────────────────────────

def main():
    settings = _settings()
    theme = _theme()
    if 'animations' not in st.session_state:
        _start_animations()
    navigator = SectionNavigator(PORTFOLIO.section_ids, _render_scroll)
    resume = _resume_bytes(str(settings.resolved_resume_path))

    st.markdown(f"""
    <style>
      :root {{ {THEME_VARS[ThemePreference(st.session_state['theme'])]} }}
      .stApp {{ background:var(--pf-bg); color:var(--pf-text); }}
      .stApp h1, .stApp h2, .stApp h3, .stApp label, .stApp p {{ color:var(--pf-text); }}
    </style>""", unsafe_allow_html=True)

    # ─── SIDEBAR ───────────────────────────────
    with st.sidebar:
        st.markdown("### 🧭 Sections")
        for item in PORTFOLIO.nav:
            st.button(item.label, key=f"nav_{item.id}", on_click=_request_scroll, args=(item.id,),
                      use_container_width=True)
        st.markdown("---")
        st.download_button(
            "⬇️  Download site (ZIP)",
            data=_site_zip(settings.backend_url, resume, datetime.date.today().isoformat()),
            file_name="portfolio.zip",
            mime="application/zip",
            use_container_width=True,
        )
        st.button("🔁  Replay animations", on_click=_start_animations, use_container_width=True)

    # ─── HEADER ────────────────────────────────
    _anchor('hero')
    h1, h2, h3 = st.columns([6, 1.4, 0.6])
    with h1:
        st.button(P.name, key="brand", on_click=_request_scroll, args=('hero',), type="tertiary")
    with h2:
        st.download_button("⬇️ Resume", data=resume, file_name=PORTFOLIO.resume_file,
                           mime="application/pdf", use_container_width=True)
    with h3:
        st.button("🌞" if theme.dark else "🌙", key="theme_toggle", on_click=theme.toggle,
                  help="Toggle theme")

    # ─── HERO ──────────────────────────────────
    left, right = st.columns(2, gap="large")
    with left:
        st.markdown(f'<div class="pf-hero"><h1>{escape(P.name)}</h1></div>', unsafe_allow_html=True)
        typed_text()
        st.markdown(f'<p class="pf-sub">{escape(P.bio)}</p>', unsafe_allow_html=True)
        b1, b2, b3 = st.columns(3)
        b1.button("Let’s Connect", on_click=_request_scroll, args=('contact',), use_container_width=True)
        b2.link_button("GitHub", P.github, use_container_width=True)
        b3.link_button("LinkedIn", P.linkedin, use_container_width=True)
    with right:
        counter_cards()

    # ─── ABOUT ─────────────────────────────────
    _heading('about', 'About')
    c1, c2 = st.columns([2, 1], gap="large")
    with c1:
        for par in P.about:
            st.markdown(par)
        st.markdown(f'<blockquote class="pf-quote">“{escape(P.quote)}”</blockquote>', unsafe_allow_html=True)
    with c2:
        rows = ''.join(f'<tr><td style="opacity:.7">{escape(k)}</td><td style="text-align:right">{escape(v)}</td></tr>'
                       for k, v in P.quick_profile)
        st.markdown(f'<div class="pf-card"><div class="pf-sub">Quick Profile</div>'
                    f'<table style="width:100%;font-size:.9rem">{rows}</table></div>', unsafe_allow_html=True)

    # ─── SKILLS ────────────────────────────────
    _heading('skills', 'Skills')
    cols = st.columns(2, gap="large")
    for i, group in enumerate(PORTFOLIO.skill_groups):
        bars = ''.join(
            f'<div class="pf-bar-row"><span>{escape(b.name)}</span><span>{b.level}%</span></div>'
            f'<div class="pf-bar"><div style="width:{b.level}%"></div></div>'
            for b in group.bars
        )
        cols[i % 2].markdown(f'<div class="pf-card"><h3>{escape(group.name)}</h3>{_chips(group.chips)}{bars}</div>',
                             unsafe_allow_html=True)

    # ─── PROJECTS ──────────────────────────────
    _heading('projects', 'Projects')
    cols = st.columns(2, gap="large")
    for i, proj in enumerate(PORTFOLIO.projects):
        with cols[i % 2]:
            st.markdown(f'<div class="pf-card"><h3>{escape(proj.title)}</h3>'
                        f'<p class="pf-sub">{escape(proj.desc)}</p>{_chips(proj.stack)}</div>',
                        unsafe_allow_html=True)
            a, b = st.columns(2)
            a.link_button("View on GitHub ↗", proj.github, use_container_width=True)
            if b.button("View Details", key=f"details_{i}", use_container_width=True):
                st.toast("Details coming soon!")

    # ─── EXPERIENCE / EDUCATION / CERTIFICATIONS ─
    _heading('experience', 'Experience')
    for exp in PORTFOLIO.experience:
        bullets = ''.join(f'<li>{escape(b)}</li>' for b in exp.bullets)
        st.markdown(f'<div class="pf-card"><h3>{escape(exp.title)}</h3><div class="pf-sub">{escape(exp.period)}</div>'
                    f'<ul>{bullets}</ul></div>', unsafe_allow_html=True)

    _heading('education', 'Education')
    for edu in PORTFOLIO.education:
        st.markdown(f'<div class="pf-card"><h3>{escape(edu.degree)}</h3><p>{escape(edu.summary)}</p></div>',
                    unsafe_allow_html=True)

    _heading('certifications', 'Certifications')
    cols = st.columns(2, gap="large")
    for i, cert in enumerate(PORTFOLIO.certifications):
        note = f'<div class="pf-sub" style="font-size:.75rem">{escape(cert.note)}</div>' if cert.note else ''
        cols[i % 2].markdown(f'<div class="pf-card">{escape(cert.name)}{note}</div>', unsafe_allow_html=True)

    # ─── CONTACT ───────────────────────────────
    _heading('contact', 'Contact')
    controller = _contact()
    form_col, links_col = st.columns([2, 1], gap="large")
    with form_col:
        with st.form("contact_form"):
            n, e = st.columns(2)
            n.text_input("Name", key="contact_name", placeholder="Your name")
            e.text_input("Email", key="contact_email", placeholder="you@example.com")
            st.text_area("Message", key="contact_message", placeholder="How can I help?", height=140)
            st.form_submit_button("Sending…" if controller.submitting else "Send Message",
                                  on_click=_submit_contact, disabled=controller.submitting)
        missing = st.session_state.get('contact_missing')
        if missing:
            st.warning(f"Please fill in: {', '.join(missing)}")
        elif controller.result is SubmissionResult.SUCCESS:
            st.success(SUCCESS_MESSAGE)
        elif controller.result is SubmissionResult.ERROR:
            st.error(controller.error)
    with links_col:
        for link in PORTFOLIO.contact_links:
            st.markdown(f"[{link.label}]({link.url})")

    st.markdown(f'<div class="pf-footer">© {datetime.datetime.now().year} {escape(P.name)} — Crafted with care.</div>',
                unsafe_allow_html=True)

    # ─── SCROLL EFFECTS ────────────────────────
    components.html(f"<script>{scroll_script(in_parent=True)}</script>", height=0)
    target = st.session_state.pop('scroll_target', None)
    if target:
        navigator.scroll_to(target)


if __name__ == "__main__":
    main()
