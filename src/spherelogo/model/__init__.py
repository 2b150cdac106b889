"""
The MODEL layer contains the logo geometry and the image export.
The geometry has NO knowledge of the GUI (Qt); the export only touches QImage.
"""
