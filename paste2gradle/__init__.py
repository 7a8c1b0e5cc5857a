"""
paste2gradle: Turn a pasted multi-file Android snippet into a Gradle project.

Splits one block of mixed source text into Java sources, manifest, layout and
resource XML, and Gradle build files, places each in the conventional Android
project layout, and fills in whatever boilerplate the paste did not provide.
"""

__version__ = "1.0.0"
__author__ = "paste2gradle Team"
