"""Single EC2 web server behind an HTTP-only security group."""
