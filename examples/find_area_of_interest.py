from extentpicker import pick_extent, CaptureFailed

def main():
    # Zoom in on Australia so the clicks can be more precise
    initial_extent = (112, 156, -44, -8)

    print(f"Opening map for extent: {initial_extent}")
    try:
        ext = pick_extent(initial_extent, resolution="medium", round_to=6)
    except CaptureFailed as e:
        print(f"Failed: {e}")
        return

    print(f"Width: {ext.width:.3f} deg, height: {ext.height:.3f} deg")
    print(f"bbox (west, south, east, north): {ext.as_bbox()}")

if __name__ == "__main__":
    main()
