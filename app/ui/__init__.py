"""UI building blocks: styles, components and static content."""
