"""Text emitters — stylesheet, runtime module and type declarations for one atlas."""
