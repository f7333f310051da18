"""Update several nix flakes with one command, to share dependencies across them."""
