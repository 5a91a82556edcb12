from flask import Blueprint, request, jsonify, current_app

from facehash.kernel.string_hash import string_hash
from facehash.kernel.face_deriver import derive, check_palette_size, PROTOCOL
from facehash.kernel.colors import palette_by_name, resolve_color, parse_hex
from facehash.kernel.fcp_protocol import fcp_pack, fcp_parse
from facehash.kernel.presets import preset_for, tilt, aspect_ratio, blink_timings

bp = Blueprint("api", __name__, url_prefix="/")

def _bad(reason, status=400):
    current_app.logger.warning("rejected request %s: %s", request.path, reason)
    return jsonify({"ok": False, "error": str(reason)}), status

def _palette(name=None):
    return palette_by_name(name or current_app.config["PALETTE"])

def _int(value, field):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be an integer") from None

def _face(name, palette, colors=None):
    size = len(palette) if colors is None else check_palette_size(colors)
    face = derive(name, size)
    desc = face.descriptor()
    current_app.logger.debug("face %r -> %s", name, desc)
    out = face.to_dict()
    out["name"] = name
    out["descriptor"] = desc
    out["color"] = resolve_color(palette, face.color_index)
    return out

# ---------- health / version ----------
@bp.route("/health")
def health():
    return jsonify({"ok": True})

@bp.route("/version")
def version():
    return jsonify({"name": "Facehash", "protocol": PROTOCOL, "api": 1})

# ---------- hash / face ----------
@bp.route("/api/hash")
def api_hash():
    name = request.args.get("name", "")
    return jsonify({"name": name, "hash": string_hash(name)})

@bp.route("/api/face")
def api_face():
    try:
        palette = _palette(request.args.get("palette"))
        colors = request.args.get("colors")
        colors = _int(colors, "colors") if colors is not None else None
        return jsonify(_face(request.args.get("name", ""), palette, colors))
    except ValueError as e:
        return _bad(e)

@bp.route("/api/faces", methods=["POST"])
def api_faces():
    data = request.get_json(force=True, silent=True) or {}
    names = data.get("names")
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        return _bad("names must be a list of strings")
    if len(names) > current_app.config["MAX_BATCH"]:
        return _bad(f"at most {current_app.config['MAX_BATCH']} names per request")
    try:
        palette = _palette(data.get("palette"))
        # colors must already be a JSON int
        return jsonify({"faces": [_face(n, palette, data.get("colors")) for n in names]})
    except ValueError as e:
        return _bad(e)

# ---------- colors / presets ----------
@bp.route("/api/color")
def api_color():
    try:
        palette = _palette(request.args.get("palette"))
        index = _int(request.args.get("index", "0"), "index")
    except ValueError as e:
        return _bad(e)
    color = resolve_color(palette, index)
    return jsonify({"index": index, "color": color, "rgb": list(parse_hex(color))})

@bp.route("/api/presets")
def api_presets():
    name = request.args.get("name", "")
    intensity = request.args.get("intensity", "dramatic")
    try:
        preset = preset_for(intensity)
    except ValueError as e:
        return _bad(e)
    face = derive(name)
    rx, ry = tilt(face.rotation, intensity)
    delay, duration = blink_timings(name)
    return jsonify({
        "name": name,
        "intensity": intensity,
        "rotateX": rx,
        "rotateY": ry,
        "translateZ": preset.translate_z,
        "perspective": preset.perspective,
        "aspectRatio": aspect_ratio(face.face_type),
        "blink": {"delay": delay, "duration": duration},
    })

# ---------- FCP ----------
@bp.route("/api/fcp", methods=["POST"])
def api_fcp():
    data = request.get_json(force=True, silent=True) or {}
    try:
        op, args = fcp_parse(data.get("msg", ""))
    except ValueError as e:
        return jsonify({"resp": fcp_pack("ERR", reason=str(e))})
    try:
        if op == "F":
            palette = _palette(args.get("palette"))
            colors = _int(args["colors"], "colors") if args.get("colors") else None
            face = _face(args.get("name", ""), palette, colors)
            return jsonify({"resp": fcp_pack("OK", d=face["descriptor"], color=face["color"])})

        elif op == "H":
            return jsonify({"resp": fcp_pack("OK", hash=string_hash(args.get("name", "")))})

        elif op == "C":
            palette = _palette(args.get("palette"))
            color = resolve_color(palette, _int(args.get("index", "0"), "index"))
            return jsonify({"resp": fcp_pack("OK", color=color)})

        else:
            return jsonify({"resp": fcp_pack("ERR", reason=f"unknown op {op}")})
    except ValueError as e:
        current_app.logger.warning("fcp %s failed: %s", op, e)
        return jsonify({"resp": fcp_pack("ERR", reason=str(e))})
