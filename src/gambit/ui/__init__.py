"""Qt front-end. Reads controller accessors, feeds clicks back as move text."""
