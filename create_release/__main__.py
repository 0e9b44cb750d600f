from create_release.cli.app import main

main()
