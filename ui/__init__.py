"""Front ends that drive an app at its frame rate and draw its graphics."""
