"""A falling-block puzzle game: pieces, the board, and a curses front end."""