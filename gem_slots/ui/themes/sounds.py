"""Win chime for Gem Slots.

The chime is embedded as a base64 MP3 and shipped to the browser on the first
win only; it stays cached on ``window.parent._gs_audio`` and later wins send a
one-line play call.

Player preferences live in plain session-state keys (``_sfx_pref`` and
``_sfx_volume``) rather than widget keys, because Streamlit drops widget keys
for widgets that are not rendered on a rerun.
"""

from __future__ import annotations

import base64
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components

# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------

_SOUNDS_DIR = Path(__file__).resolve().parents[3] / "assets" / "sounds"

# Effect name -> file under assets/sounds
_SFX_FILES: dict[str, str] = {
    "win": "win.mp3",
}

_PREF_WIDGETS = {
    "_sfx_pref": "_sfx_widget",
    "_sfx_volume": "_sfx_vol_widget",
}


@st.cache_data(show_spinner=False)
def _load_audio_b64(filename: str) -> str | None:
    """Base64 body of an audio asset, or ``None`` when it is not installed."""
    path = _SOUNDS_DIR / filename
    if not path.is_file():
        return None
    return base64.b64encode(path.read_bytes()).decode("ascii")


# ---------------------------------------------------------------------------
# Queueing
# ---------------------------------------------------------------------------


def play_sfx(name: str) -> None:
    """Mark ``name`` to be played by the next :func:`render_audio_system` call.

    Unknown names and muted sessions are ignored.
    """
    if name in _SFX_FILES and st.session_state.get("_sfx_pref", True):
        st.session_state["_sfx_pending"] = name


def has_pending_sfx() -> bool:
    return "_sfx_pending" in st.session_state


# ---------------------------------------------------------------------------
# Sidebar controls
# ---------------------------------------------------------------------------


def _copy_widget_value(pref_key: str) -> None:
    st.session_state[pref_key] = st.session_state[_PREF_WIDGETS[pref_key]]


def render_sound_controls(enabled: bool = True) -> None:
    """Sidebar toggle for the win chime plus its volume."""
    st.session_state.setdefault("_sfx_pref", enabled)
    st.session_state.setdefault("_sfx_volume", 50)

    with st.sidebar:
        st.toggle(
            "Win chime",
            value=st.session_state["_sfx_pref"],
            key=_PREF_WIDGETS["_sfx_pref"],
            on_change=_copy_widget_value,
            args=("_sfx_pref",),
        )
        if not st.session_state["_sfx_pref"]:
            return
        st.slider(
            "Chime volume",
            min_value=0,
            max_value=100,
            value=st.session_state["_sfx_volume"],
            key=_PREF_WIDGETS["_sfx_volume"],
            on_change=_copy_widget_value,
            args=("_sfx_volume",),
            format="%d%%",
        )


# ---------------------------------------------------------------------------
# Browser playback
# ---------------------------------------------------------------------------


def render_audio_system() -> None:
    """Emit the script that plays the queued effect, if any."""
    name = st.session_state.pop("_sfx_pending", None)
    if name is None or not st.session_state.get("_sfx_pref", True):
        return

    sent: set[str] = st.session_state.setdefault("_audio_loaded", set())
    preload = ""
    if name not in sent:
        b64 = _load_audio_b64(_SFX_FILES[name])
        if b64 is None:
            return
        preload = f"gs.sfx['{name}'] = 'data:audio/mpeg;base64,{b64}';"
        sent.add(name)

    volume = st.session_state.get("_sfx_volume", 50) / 100.0
    script = f"""<script>
(function() {{
  try {{
    var p = window.parent;
    var gs = p._gs_audio || (p._gs_audio = {{ sfx: {{}} }});
    {preload}
    var src = gs.sfx['{name}'];
    if (src) {{
      var chime = new p.Audio(src);
      chime.volume = {volume};
      chime.play().catch(function() {{}});
    }}
  }} catch (e) {{ console.warn('gem slots audio:', e); }}
}})();
</script>"""
    components.html(script, height=0)
