from rmenu_ui.cli import main

main()
