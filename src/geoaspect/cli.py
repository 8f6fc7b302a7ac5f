from __future__ import annotations

import argparse
import logging
import sys

from .coord import coord_cartesian, coord_quickmap
from .distance import GeoPoint, central_angle, distance_m
from .errors import InvalidRange
from .map import save_range_map

COORDS = {
    "cartesian": coord_cartesian,
    "quickmap": coord_quickmap,
}


def cmd_aspect(args: argparse.Namespace) -> int:
    try:
        coord = COORDS[args.variant](xlim=args.xlim, ylim=args.ylim, expand=not args.no_expand)
        ranges = coord.train((args.xmin, args.xmax), (args.ymin, args.ymax))
    except InvalidRange as exc:
        print(f"Invalid range: {exc}", file=sys.stderr)
        return 2

    aspect = coord.aspect(ranges)
    print("unset" if aspect is None else f"{aspect:.6f}")
    return 0


def cmd_distance(args: argparse.Namespace) -> int:
    a = GeoPoint(args.lon1, args.lat1)
    b = GeoPoint(args.lon2, args.lat2)
    if args.radians:
        print(f"{central_angle(a, b):.9f}")
    else:
        print(f"{distance_m(a, b):.3f}")
    return 0


def cmd_map(args: argparse.Namespace) -> int:
    try:
        path = save_range_map((args.west, args.east), (args.south, args.north), out_html=args.out_html, width=args.width)
    except InvalidRange as exc:
        print(f"Invalid range: {exc}", file=sys.stderr)
        return 2
    print(path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="geoaspect", description="Aspect ratios for longitude/latitude plots")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = p.add_subparsers(dest="command", required=True)

    pa = sub.add_parser("aspect", help="Compute the panel aspect ratio for a data range")
    pa.add_argument("--xmin", type=float, required=True)
    pa.add_argument("--xmax", type=float, required=True)
    pa.add_argument("--ymin", type=float, required=True)
    pa.add_argument("--ymax", type=float, required=True)
    pa.add_argument("--variant", choices=sorted(COORDS), default="quickmap")
    pa.add_argument("--xlim", type=float, nargs=2, metavar=("MIN", "MAX"))
    pa.add_argument("--ylim", type=float, nargs=2, metavar=("MIN", "MAX"))
    pa.add_argument("--no-expand", dest="no_expand", action="store_true", help="Do not pad the trained ranges")
    pa.set_defaults(func=cmd_aspect)

    pd = sub.add_parser("distance", help="Great-circle distance between two points")
    pd.add_argument("--lon1", type=float, required=True)
    pd.add_argument("--lat1", type=float, required=True)
    pd.add_argument("--lon2", type=float, required=True)
    pd.add_argument("--lat2", type=float, required=True)
    pd.add_argument("--radians", action="store_true", help="Print the central angle instead of meters")
    pd.set_defaults(func=cmd_distance)

    pm = sub.add_parser("map", help="Create interactive Folium map sized by the quickmap aspect")
    pm.add_argument("--west", type=float, required=True)
    pm.add_argument("--south", type=float, required=True)
    pm.add_argument("--east", type=float, required=True)
    pm.add_argument("--north", type=float, required=True)
    pm.add_argument("--width", type=int, default=800)
    pm.add_argument("--out-html", dest="out_html", type=str, default="range_map.html")
    pm.set_defaults(func=cmd_map)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
