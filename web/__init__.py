"""web/ -- Server-rendered dashboard shell behind the authorization gate."""
