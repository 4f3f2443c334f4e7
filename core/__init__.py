"""core/ -- Configuration kernel. Imports nothing from api/, web/ or auth/."""
