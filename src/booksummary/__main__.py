from booksummary.cli import main

main()
