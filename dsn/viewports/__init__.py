"""
The dsn 'viewports' implements the tools for managing a viewport on a (virtualized) document.

Two rectangles are involved, and it's useful to keep them apart:

* the visible rectangle is exactly what's on screen: the scroll position and the size of the surface.
* the viewport bounds are the region for which layout fragments are kept materialized. They are at least the visible
  rectangle, but while the user is scrolling they also include some prepared content above and below it, so that the
  next few scroll steps don't hit unrendered regions.

Changes to the surface (resizing, scrolling, a changed content size) are expressed as notes that are played against an
immutable ViewportStructure. The TextViewportLayoutController reads the resulting viewport bounds (via its delegate),
lays those out, and reports back the size of the document as far as it is known.
"""
