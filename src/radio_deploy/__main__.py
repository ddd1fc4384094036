from radio_deploy import main

if __name__ == '__main__':
    main()
