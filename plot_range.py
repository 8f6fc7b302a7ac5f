from geoaspect import coord_quickmap
from geoaspect.map import save_range_map

# New Zealand, trained from the data extent
lon_range = (165.9, 178.6)
lat_range = (-47.3, -34.4)

coord = coord_quickmap()
ranges = coord.train(lon_range, lat_range)
print(f"Panel aspect (height/width): {coord.aspect(ranges):.4f}")

html_path = save_range_map(ranges.x, ranges.y, out_html="range_map.html")
print(f"Map saved to {html_path}")
