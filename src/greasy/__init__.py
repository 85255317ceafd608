"""greasy - run the nearest project's build/test tool from anywhere inside it."""
